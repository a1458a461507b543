#!/usr/bin/env python
"""Unit tests for the classic Jenks matrix method."""
import logging
import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from natbreaks import fisher_breaks
from natbreaks.errors import BreaksInputError
from natbreaks.jenks import jenks, jenks_matrices
from natbreaks.metrics import within_class_ss

logging.basicConfig(level=logging.ERROR, format="%(message)s")


class JenksTests(unittest.TestCase):
    """Tests for Jenks natural breaks."""

    def test_three_clusters(self):
        """Well-separated clusters are recovered, with the maximum appended."""
        data = np.array([9.0, 1.0, 2.0, 10.0, 21.0, 1.5, 20.0, 9.5])
        result = jenks(data, 3)
        assert_array_equal(result, [1.0, 9.0, 20.0, 21.0])
        # Input is left unsorted
        self.assertEqual(data[0], 9.0)

    def test_one_class(self):
        assert_array_equal(jenks([3.0, 1.0, 2.0], 1), [1.0, 3.0])

    def test_variance_matrix(self):
        """Column 1 holds the sum of squared deviations of each prefix."""
        data = np.array([1.0, 2.0, 4.0, 7.0])
        _limits, variances = jenks_matrices(data, 2)
        for l in range(1, len(data) + 1):
            prefix = data[:l]
            assert_allclose(variances[l, 1],
                            ((prefix - prefix.mean()) ** 2).sum(), atol=1e-12)
        # Best two classes of all four: {1, 2, 4} + {7}
        assert_allclose(variances[4, 2], 14.0 / 3, atol=1e-12)

    def test_bad_n_classes(self):
        with self.assertRaises(BreaksInputError):
            jenks([1.0, 2.0], 3)
        with self.assertRaises(BreaksInputError):
            jenks([1.0, 2.0], 0)

    def test_matches_fisher(self):
        """Both methods reach the same minimal within-class sum of squares."""
        rng = np.random.default_rng(0x5EED)
        data = np.concatenate([rng.normal(-4, 1.5, 60),
                               rng.normal(-1, 0.5, 40),
                               rng.normal(2, 1.0, 90)]).round(1)
        for n_classes in (2, 3, 5):
            jbreaks = jenks(data, n_classes)[:-1]
            fbreaks = fisher_breaks(data, n_classes)
            self.assertAlmostEqual(within_class_ss(data, jbreaks).sum(),
                                   within_class_ss(data, fbreaks).sum(),
                                   places=6)


if __name__ == "__main__":
    unittest.main()
