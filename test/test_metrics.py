#!/usr/bin/env python
"""Unit tests for classification goodness-of-fit metrics."""
import logging
import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from natbreaks import metrics

logging.basicConfig(level=logging.ERROR, format="%(message)s")


class MetricsTests(unittest.TestCase):
    """Tests for class assignment and sums of squares."""

    values = np.array([1.0, 2.0, 3.0, 10.0, 11.0, 12.0, 30.0])
    breaks = np.array([1.0, 10.0, 30.0])

    def test_assign_classes(self):
        """Breaks are lower limits of the classes."""
        assert_array_equal(metrics.assign_classes(self.values, self.breaks),
                           [0, 0, 0, 1, 1, 1, 2])
        # Out-of-range values clip to the outer classes
        assert_array_equal(metrics.assign_classes([-5.0, 99.0], self.breaks),
                           [0, 2])

    def test_within_class_ss(self):
        assert_allclose(metrics.within_class_ss(self.values, self.breaks),
                        [2.0, 2.0, 0.0])

    def test_weighted(self):
        """Integer weights act like repeated values."""
        weights = np.array([2, 1, 1, 1, 1, 1, 1])
        repeated = np.repeat(self.values, weights)
        assert_allclose(
            metrics.within_class_ss(self.values, self.breaks, weights),
            metrics.within_class_ss(repeated, self.breaks))
        assert_allclose(metrics.total_ss(self.values, weights),
                        metrics.total_ss(repeated))

    def test_empty_class(self):
        ss = metrics.within_class_ss(self.values, [1.0, 5.0, 10.0, 30.0])
        self.assertEqual(ss[1], 0.0)

    def test_gvf(self):
        gvf = metrics.goodness_of_variance_fit(self.values, self.breaks)
        sdam = ((self.values - self.values.mean()) ** 2).sum()
        self.assertAlmostEqual(gvf, (sdam - 4.0) / sdam)
        self.assertEqual(metrics.goodness_of_variance_fit([2.0, 2.0], [2.0]),
                         1.0)
        # Every value its own class
        self.assertAlmostEqual(
            metrics.goodness_of_variance_fit(self.values, self.values), 1.0)

    def test_class_summary(self):
        table = metrics.class_summary(self.values, self.breaks)
        self.assertEqual(list(table.columns),
                         ["class", "lower", "upper", "count", "mean", "ss"])
        assert_array_equal(table["count"], [3, 3, 1])
        assert_array_equal(table["upper"], [3.0, 12.0, 30.0])
        assert_allclose(table["mean"], [2.0, 11.0, 30.0])

    def test_no_breaks(self):
        with self.assertRaises(ValueError):
            metrics.assign_classes(self.values, [])


if __name__ == "__main__":
    unittest.main()
