"""Fisher's exact optimal univariate classification ("Jenks natural breaks").

Splits an ascending series of distinct, weighted values into k contiguous
classes minimizing the total within-class sum of squares. The dynamic program
closes one class per row; each row is solved by `search.BreakSearch`.

Complexity: O(k m log m) for m distinct values.

See:

- Fisher, W.D. (1958) "On grouping for maximum homogeneity", JASA 53:789-798.
- https://en.wikipedia.org/wiki/Jenks_natural_breaks_optimization
"""
import logging

import numpy as np

from .errors import BreaksInputError, InvariantError
from .params import DEFAULT_ENGINE, SEARCH_ENGINES
from .search import BreakMatrix, BreakSearch
from .series import WeightedSeries, value_counts


class FisherBreaks:
    """State of one Fisher classification of prepared value/count pairs."""

    def __init__(self, values, counts, n_classes, engine=DEFAULT_ENGINE):
        if engine not in SEARCH_ENGINES:
            raise BreaksInputError("'engine' must be one of: %s; got: %r"
                                   % (", ".join(SEARCH_ENGINES), engine))
        self.n_classes = n_classes
        self.engine = engine
        self.buffer_size = len(values) - (n_classes - 1)
        self.series = WeightedSeries(values, counts, self.buffer_size)
        self.previous_cost = self.series.initial_cost.copy()
        self.current_cost = np.zeros(self.buffer_size)
        self.matrix = BreakMatrix(max(n_classes - 2, 0), self.buffer_size)
        self.completed_rows = 0

    def _search(self, row=None):
        return BreakSearch(self.series, self.previous_cost, self.current_cost,
                           self.matrix, self.completed_rows, row)

    def calc_all(self):
        """Fill one backpointer row per class between the first and the last."""
        if self.n_classes < 2:
            return
        self.completed_rows = 1
        for row in range(self.n_classes - 2):
            search = self._search(row)
            if self.engine == "recursive":
                search.calc_row_recursive()
            else:
                search.calc_row_levelwise()
            self.previous_cost, self.current_cost = (self.current_cost,
                                                     self.previous_cost)
            self.completed_rows += 1

    def reconstruct(self):
        """Walk the backpointers from the last class down to the first.

        Returns the lower limit (lowest value) of each class, ascending.
        """
        values = self.series.values
        breaks = np.empty(self.n_classes)
        if self.n_classes > 1:
            if self.completed_rows != self.n_classes - 1:
                raise InvariantError("Reconstruction before all rows were "
                                     "computed (%d of %d)"
                                     % (self.completed_rows,
                                        self.n_classes - 1))
            # The last class always ends at the final value
            last = self._search().find_best_boundary(self.buffer_size - 1, 0,
                                                     self.buffer_size)
            for j in range(self.n_classes - 1, 0, -1):
                breaks[j] = values[last + j]
                if j > 1:
                    last = self.matrix.get(j - 2, last)
        breaks[0] = values[0]
        return breaks


def classify_value_counts(n_classes, values, counts, engine=DEFAULT_ENGINE):
    """Fisher natural breaks of distinct ascending values with counts.

    Parameters
    ----------
    n_classes : int
        Number of classes (k).
    values : array-like
        Distinct values, strictly ascending.
    counts : array-like
        Positive occurrence count of each value.
    engine : str
        'levelwise' or 'recursive'; both give identical results.

    Returns
    -------
    np.ndarray
        The lowest value of each of the `n_classes` classes, ascending. The
        first element is the minimum of `values`.
    """
    n_values = len(values)
    if n_classes < 0:
        raise BreaksInputError("Number of classes must not be negative; got %d"
                               % n_classes)
    if n_classes > n_values:
        raise BreaksInputError("Cannot make %d classes from %d distinct values"
                               % (n_classes, n_values))
    if n_classes == 0:
        return np.array([], dtype=np.float64)
    fisher = FisherBreaks(values, counts, n_classes, engine)
    fisher.calc_all()
    return fisher.reconstruct()


def fisher_breaks(values, n_classes, engine=DEFAULT_ENGINE,
                  absolute_fallback=False):
    """Find natural breaks of raw values by Fisher's exact method.

    Parameters
    ----------
    values : array-like
        Numbers in any order, duplicates allowed.
    n_classes : int
        Number of classes (k).
    engine : str
        Search engine, see `classify_value_counts`.
    absolute_fallback : bool
        If there are no more distinct values than classes, return their
        absolute values (legacy behavior of some ports) instead of the values
        themselves.

    Returns
    -------
    np.ndarray
        Ascending break values: `n_classes` class lower limits, or the sorted
        distinct values if there are at most `n_classes` of them.
    """
    if n_classes < 0:
        raise BreaksInputError("Number of classes must not be negative; got %d"
                               % n_classes)
    if n_classes == 0:
        return np.array([], dtype=np.float64)
    distinct, counts = value_counts(values)
    if len(distinct) <= n_classes:
        logging.info("Only %d distinct values for %d classes; "
                     "using the values as breaks", len(distinct), n_classes)
        if absolute_fallback:
            return np.abs(distinct)
        return distinct
    logging.debug("Classifying %d distinct values (%d total) into %d classes",
                  len(distinct), counts.sum(), n_classes)
    return classify_value_counts(n_classes, distinct, counts, engine)
