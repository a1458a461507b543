"""Weighted value series with constant-time range sums.

The Fisher break search only ever needs two quantities of a contiguous run of
distinct values: its total weight and its total weighted value. Both are kept
as running (cumulative) sums so that any range is the difference of two
entries.
"""
import logging

import numpy as np

from .errors import BreaksInputError, InvariantError


def value_counts(values):
    """Reduce raw values to sorted distinct values and their occurrence counts.

    Parameters
    ----------
    values : array-like
        Numbers in any order; duplicates allowed. NaN entries are dropped.

    Returns
    -------
    tuple of np.ndarray
        (distinct values ascending as float64, counts as int64)
    """
    values = np.asarray(values, dtype=np.float64).ravel()
    is_nan = np.isnan(values)
    if is_nan.any():
        logging.warning("Dropping %d NaN values of %d",
                        is_nan.sum(), len(values))
        values = values[~is_nan]
    if not np.isfinite(values).all():
        raise BreaksInputError("Input values must be finite; got %d infinite"
                               % np.isinf(values).sum())
    distinct, counts = np.unique(values, return_counts=True)
    return distinct, counts.astype(np.int64)


class WeightedSeries:
    """Cumulative weights and weighted values of an ascending value series.

    Parameters
    ----------
    values : array-like
        Distinct values, strictly ascending.
    counts : array-like
        Occurrence count (weight) of each value; all strictly positive.
    buffer_size : int
        Number of leading entries that may close the first class. Their
        first-class gains are seeded into `initial_cost`.
    """

    def __init__(self, values, counts, buffer_size):
        self.values = np.asarray(values, dtype=np.float64)
        weights = np.asarray(counts)
        if len(weights) != len(self.values):
            raise InvariantError("Unequal array lengths: values=%d, counts=%d"
                                 % (len(self.values), len(weights)))
        self.n = len(self.values)
        steps = np.diff(self.values)
        if (steps <= 0).any():
            idx = int(np.argmax(steps <= 0)) + 1
            raise InvariantError("Values must be strictly increasing; "
                                 "got %r after %r"
                                 % (self.values[idx], self.values[idx - 1]),
                                 idx, self.values[idx])
        if (weights <= 0).any():
            idx = int(np.argmax(weights <= 0))
            raise InvariantError("Weights must be positive; got %r"
                                 % weights[idx], idx, weights[idx])
        self.cum_weights = np.cumsum(weights)
        # Overflow or lost precision shows up as a running total smaller than
        # the weight just added
        if (self.cum_weights < weights).any():
            idx = int(np.argmax(self.cum_weights < weights))
            raise InvariantError("Cumulative weight overflowed or lost "
                                 "precision", idx, self.cum_weights[idx])
        self.cum_weighted_values = np.cumsum(weights * self.values)
        # First class covers values[0..i]
        head_cwv = self.cum_weighted_values[:buffer_size]
        self.initial_cost = head_cwv * head_cwv / self.cum_weights[:buffer_size]

    def __len__(self):
        return self.n

    def _check_range(self, b, e):
        # Index 0 always belongs to the first class, so no range starts there
        if b == 0:
            raise InvariantError("Range query must not start at index 0",
                                 b)
        if b > e:
            raise InvariantError("Range query begins after its end (%d > %d)"
                                 % (b, e), b)
        if e >= self.n:
            raise InvariantError("Range query ends beyond the series (n=%d)"
                                 % self.n, e)

    def sum_weights(self, b, e):
        """Total weight of entries b..e inclusive."""
        self._check_range(b, e)
        return self.cum_weights[e] - self.cum_weights[b - 1]

    def sum_weighted_values(self, b, e):
        """Total weighted value of entries b..e inclusive."""
        self._check_range(b, e)
        return self.cum_weighted_values[e] - self.cum_weighted_values[b - 1]

    def gain(self, b, e):
        """Weighted squared mean of entries b..e: sum(w*x)**2 / sum(w).

        Total within-class sum of squares equals a constant minus the sum of
        these terms over the classes, so the search maximizes their sum.
        """
        swv = self.sum_weighted_values(b, e)
        return swv * swv / self.sum_weights(b, e)

    def gains(self, begins, ends):
        """Vectorized `gain` over arrays of begin and end indices.

        Performs the same floating-point operations as `gain`, element-wise,
        so results are bit-identical.
        """
        begins = np.asarray(begins)
        ends = np.asarray(ends)
        if len(begins) and (begins.min() < 1 or (begins > ends).any()
                            or ends.max() >= self.n):
            bad = int(np.argmax((begins < 1) | (begins > ends)
                                | (ends >= self.n)))
            self._check_range(int(begins[bad]), int(np.broadcast_to(
                ends, begins.shape)[bad]))
        swv = self.cum_weighted_values[ends] - self.cum_weighted_values[begins - 1]
        sw = self.cum_weights[ends] - self.cum_weights[begins - 1]
        return swv * swv / sw
