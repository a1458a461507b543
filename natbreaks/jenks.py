"""Jenks natural breaks optimization, classic O(k n^2) matrix method.

Slower than `fisher` but independent of it, so it doubles as a check on the
divide-and-conquer search. Values are not weighted; duplicates simply count
once per occurrence.

See:

- https://en.wikipedia.org/wiki/Jenks_natural_breaks_optimization
- https://www.macwright.org/2013/02/18/literate-jenks.html
- https://www.macwright.org/simple-statistics/docs/simple_statistics.html
"""
import logging

import numpy as np

from .errors import BreaksInputError
from .params import JENKS_WARN_SIZE


def jenks(data, n_classes):
    """Find breakpoints using Jenks natural breaks optimization.

    Returns the lowest value of each class, followed by the maximum of the
    data (`n_classes` + 1 values).
    """
    data = np.sort(np.asarray(data, dtype=np.float64).ravel())
    if not 1 <= n_classes <= len(data):
        raise BreaksInputError("Cannot make %d classes from %d values"
                               % (n_classes, len(data)))
    if len(data) > JENKS_WARN_SIZE:
        logging.warning("Jenks matrices for %d values may take a while; "
                        "consider the 'fisher' method", len(data))
    lower_class_limits, _variance_combinations = jenks_matrices(data, n_classes)
    return jenks_breaks(data, lower_class_limits, n_classes)


def jenks_matrices(data, n_classes):
    """Compute Matrices for Jenks.

    Compute the matrices required for Jenks breaks. These matrices can be used
    for any classing of data with `classes <= n_classes`.

    Both are 1-indexed: row l covers the first l sorted values, column j is
    the number of classes. `lower_class_limits[l, j]` is the (1-based) index
    of the first value in the last of j classes over data[:l].
    """
    n_rows = len(data) + 1
    n_cols = n_classes + 1
    lower_class_limits = np.zeros((n_rows, n_cols), dtype=np.int64)
    lower_class_limits[1, 1:] = 1
    lower_class_limits[2:, 1] = 1
    # Optimal variance combinations for all classes
    variance_combinations = np.zeros((n_rows, n_cols), dtype=np.float64)
    variance_combinations[2:, 1:] = np.inf

    for l in range(2, n_rows):
        # Sum of squared deviations of data[l-m:l], for m = 1..l
        vals = data[l - 1::-1]
        sums = np.cumsum(vals)
        sums_square = np.cumsum(vals ** 2)
        variances = sums_square - sums ** 2 / np.arange(1, l + 1)
        variance_combinations[l, 1] = variances[l - 1]
        if n_cols <= 2:
            continue
        # Last class is data[l-m:l]; the other j-1 classes cover data[:l-m]
        m = np.arange(1, l)
        candidates = (variances[:l - 1, None]
                      + variance_combinations[l - m, 1:n_cols - 1])
        # Ties go to the longest last class, i.e. the highest m
        best = (l - 2) - np.argmin(candidates[::-1], axis=0)
        lower_class_limits[l, 2:] = l - best
        variance_combinations[l, 2:] = candidates[best, np.arange(n_cols - 2)]

    # Only `lower_class_limits` is needed to calculate breaks, but
    # variances can be useful to evaluate goodness of fit.
    return lower_class_limits, variance_combinations


def jenks_breaks(data, lower_class_limits, n_classes):
    """Pull Breaks Values for Jenks.

    The second part of the jenks recipe: Take the calculated matrices and derive
    an array of n breaks.

    Backtracking, in DP lingo.
    """
    breakpoints = np.zeros(n_classes + 1)
    breakpoints[n_classes] = data[-1]  # Upper bound
    # Use the lower_class_limits matrix as indices into itself, iteratively
    lower_limit_idx = len(data)
    for j in range(n_classes, 0, -1):
        lower_limit_idx = lower_class_limits[lower_limit_idx, j] - 1
        breakpoints[j - 1] = data[lower_limit_idx]
    return breakpoints
