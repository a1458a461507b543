"""Divide-and-conquer search for optimal class boundaries.

For a fixed number of already-closed classes (a "row"), every candidate end
position i of the next class needs the previous boundary p maximizing the
accumulated gain. The optimal p never decreases as i increases, so solving the
middle target first splits the remaining candidates in two. Each row costs
O(m log m) gain evaluations instead of O(m^2).

Two engines produce identical results:

- ``recursive``: the textbook recursion, one target per call.
- ``levelwise``: the same recursion tree walked breadth-first, solving all
  targets at one depth in a single vectorized batch.
"""
import logging

import numpy as np

from .errors import InvariantError


class BreakMatrix:
    """Backpointers chosen for each row and target boundary.

    Row r holds the previous boundaries recorded while closing class r + 2,
    i.e. with ``completed_rows == r + 1``.
    """

    def __init__(self, n_rows, n_cols):
        self.data = np.zeros((n_rows, n_cols), dtype=np.int64)

    @property
    def shape(self):
        return self.data.shape

    def _check(self, row, col):
        n_rows, n_cols = self.data.shape
        if not 0 <= row < n_rows:
            raise InvariantError("Break matrix row %d out of range (%d rows)"
                                 % (row, n_rows), row)
        if not 0 <= col < n_cols:
            raise InvariantError("Break matrix column %d out of range "
                                 "(%d columns)" % (col, n_cols), col)

    def get(self, row, col):
        self._check(row, col)
        return int(self.data[row, col])

    def set(self, row, col, boundary):
        self._check(row, col)
        self.data[row, col] = boundary

    def set_many(self, row, cols, boundaries):
        """Record several backpointers of one row at once."""
        cols = np.asarray(cols)
        n_cols = self.data.shape[1]
        bad = (cols < 0) | (cols >= n_cols)
        if bad.any():
            self._check(row, int(cols[np.argmax(bad)]))
        self._check(row, 0)
        self.data[row, cols] = boundaries


class BreakSearch:
    """Search state for one row of the Fisher dynamic program.

    Parameters
    ----------
    series : WeightedSeries
        Cumulative sums of the input.
    previous_cost : np.ndarray
        Best accumulated gain of `completed_rows` classes ending at each
        boundary.
    current_cost : np.ndarray
        Output buffer for this row; same length as `previous_cost`.
    matrix : BreakMatrix
        Receives this row's backpointers.
    completed_rows : int
        Number of classes already closed before this row.
    row : int or None
        Matrix row to fill; None when only the final class is resolved.
    """

    def __init__(self, series, previous_cost, current_cost, matrix,
                 completed_rows, row=None):
        if len(previous_cost) != len(current_cost):
            raise InvariantError("Cost buffers differ in length: %d vs. %d"
                                 % (len(previous_cost), len(current_cost)))
        self.series = series
        self.previous_cost = previous_cost
        self.current_cost = current_cost
        self.matrix = matrix
        self.completed_rows = completed_rows
        self.row = row
        self.buffer_size = len(previous_cost)

    def find_best_boundary(self, i, bp, ep):
        """Best previous boundary for target `i` among candidates [bp, ep).

        Stores the maximal accumulated gain in ``current_cost[i]``. Ties go to
        the lowest candidate.
        """
        if not bp < ep:
            raise InvariantError("Empty candidate range [%d, %d)" % (bp, ep), i)
        if bp > i or ep > i + 1:
            raise InvariantError("Candidate range [%d, %d) not below target %d"
                                 % (bp, ep, i), i)
        if i >= self.buffer_size or ep > self.buffer_size:
            raise InvariantError("Target or range beyond buffer size %d"
                                 % self.buffer_size, i)
        rows = self.completed_rows
        candidates = np.arange(bp, ep)
        totals = (self.previous_cost[bp:ep]
                  + self.series.gains(candidates + rows, i + rows))
        # argmax returns the first maximum, like a strict '>' scan
        best = int(np.argmax(totals))
        self.current_cost[i] = totals[best]
        return bp + best

    def calc_range(self, bi, ei, bp, ep):
        """Solve targets [bi, ei) given their answers lie in [bp, ep)."""
        if bi == ei:
            return
        mi = (bi + ei) // 2
        mp = self.find_best_boundary(mi, bp, min(ep, mi + 1))
        # Left targets cannot use a boundary beyond mp
        self.calc_range(bi, mi, bp, min(mi, mp + 1))
        self.matrix.set(self.row, mi, mp)
        # Right targets cannot use a boundary before mp
        self.calc_range(mi + 1, ei, mp, ep)

    def calc_row_recursive(self):
        self.calc_range(0, self.buffer_size, 0, self.buffer_size)

    def calc_row_levelwise(self):
        """Fill the whole row breadth-first, one vectorized batch per depth."""
        size = self.buffer_size
        bi = np.array([0])
        ei = np.array([size])
        bp = np.array([0])
        ep = np.array([size])
        depth = 0
        while len(bi):
            mi = (bi + ei) // 2
            mp = self._find_best_boundaries(mi, bp, np.minimum(ep, mi + 1))
            self.matrix.set_many(self.row, mi, mp)
            # Children: left [bi, mi) bounded above by mp; right [mi+1, ei)
            # bounded below by mp
            bi, ei, bp, ep = (np.concatenate([bi, mi + 1]),
                              np.concatenate([mi, ei]),
                              np.concatenate([bp, mp]),
                              np.concatenate([np.minimum(mi, mp + 1), ep]))
            nonempty = bi < ei
            bi, ei, bp, ep = bi[nonempty], ei[nonempty], bp[nonempty], ep[nonempty]
            depth += 1
        logging.debug("Row %d solved in %d levels", self.row, depth)

    def _find_best_boundaries(self, targets, lo, hi):
        """Vectorized `find_best_boundary` over independent targets.

        Each target i searches its own candidate range [lo[i], hi[i]).
        """
        lengths = hi - lo
        if (lengths < 1).any() or (lo > targets).any() or (hi > targets + 1).any():
            bad = int(np.argmax((lengths < 1) | (lo > targets)
                                | (hi > targets + 1)))
            raise InvariantError("Bad candidate range [%d, %d) for target %d"
                                 % (lo[bad], hi[bad], targets[bad]),
                                 int(targets[bad]))
        starts = np.cumsum(lengths) - lengths
        total = int(lengths.sum())
        # Flat list of (target, candidate) pairs, grouped by target
        group = np.repeat(np.arange(len(targets)), lengths)
        candidates = np.arange(total) - starts[group] + lo[group]
        rows = self.completed_rows
        totals = (self.previous_cost[candidates]
                  + self.series.gains(candidates + rows, targets[group] + rows))
        group_max = np.maximum.reduceat(totals, starts)
        # First position attaining each group's maximum
        positions = np.where(totals == group_max[group], np.arange(total), total)
        first = np.minimum.reduceat(positions, starts)
        self.current_cost[targets] = totals[first]
        return candidates[first]
