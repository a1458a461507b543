"""Exceptions raised while computing natural breaks."""


class BreaksInputError(ValueError):
    """The caller's input cannot be classified as requested.

    Raised before any search work starts, e.g. when more classes are requested
    than there are distinct values.
    """


class InvariantError(RuntimeError):
    """An internal invariant of the break search does not hold.

    This means the prepared input was malformed (unsorted or duplicate values,
    non-positive weights, loss of precision in the cumulative sums) or the
    search itself is defective. The computation cannot continue.
    """

    def __init__(self, msg, index=None, value=None):
        if index is not None:
            msg = "%s (at index %d)" % (msg, index)
        super().__init__(msg)
        self.index = index
        self.value = value
