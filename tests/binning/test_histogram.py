"""
Tests for histogram().

Validates:
    - Default range padding (min - k, max + k), k = (max - min) / (bins - 1) / 2
    - Half-open bins with the last bin closed
    - Weighted and density-normalized accumulation
    - Validation of bins, range and weights
"""

from __future__ import annotations

import warnings

import numpy as np
import pytest

from pysample.binning import histogram, default_range, HistogramDesign
from pysample.core.exceptions import ValidationError, DimensionError


class TestDefaultRange:

    def test_padding(self):
        lo, hi = default_range(np.array([1.0, 3.0]), bins=3)
        assert (lo, hi) == (0.5, 3.5)

    def test_extremes_centered_in_outer_bins(self):
        x = np.array([2.0, 7.0, 4.0, 12.0])
        result = histogram(x, bins=6)
        assert result.centers[0] == pytest.approx(2.0)
        assert result.centers[-1] == pytest.approx(12.0)

    def test_single_bin_no_padding(self):
        assert default_range(np.array([1.0, 4.0]), bins=1) == (1.0, 4.0)

    def test_constant_sample(self):
        assert default_range(np.array([5.0, 5.0]), bins=4) == pytest.approx((4.5, 5.5))

    def test_constant_zero_sample(self):
        assert default_range(np.array([0.0, 0.0]), bins=4) == (-1.0, 1.0)


class TestCounts:

    def test_concrete_scenario(self):
        centers, counts = histogram([1, 1, 2, 3, 3, 3], bins=3)
        np.testing.assert_array_equal(counts, [2.0, 1.0, 3.0])
        np.testing.assert_allclose(centers, [1.0, 2.0, 3.0])
        assert counts.sum() == 6
        assert np.argmax(counts) == 2

    def test_counts_sum_to_n(self, normal_sample):
        result = histogram(normal_sample, bins=37)
        assert result.counts.sum() == len(normal_sample)
        assert result.n_outside == 0

    def test_matches_numpy(self, normal_sample):
        result = histogram(normal_sample, bins=25)
        expected, edges = np.histogram(normal_sample, bins=25, range=result.range)
        np.testing.assert_array_equal(result.counts, expected)
        np.testing.assert_allclose(result.edges, edges)

    def test_half_open_bins(self):
        # edges 0, 1, 2, 3, 4
        _, counts = histogram([0.0, 1.0, 1.0, 2.0, 3.999, 4.0], bins=4, range=(0.0, 4.0))
        np.testing.assert_array_equal(counts, [1.0, 2.0, 1.0, 2.0])

    def test_shapes(self):
        result = histogram(np.arange(10.0), bins=4)
        assert result.centers.shape == (4,)
        assert result.counts.shape == (4,)
        assert result.edges.shape == (5,)
        np.testing.assert_allclose(np.diff(result.edges), result.width)

    def test_outside_explicit_range(self):
        with pytest.warns(RuntimeWarning, match="outside range"):
            result = histogram([-1.0, 0.5, 1.5, 5.0], bins=2, range=(0.0, 2.0))
        np.testing.assert_array_equal(result.counts, [1.0, 1.0])
        assert result.n_outside == 2

    def test_no_warning_for_default_range(self, normal_sample):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            histogram(normal_sample)


class TestWeightsAndDensity:

    def test_weights(self):
        _, counts = histogram([1, 1, 2, 3], bins=3, weights=[0.5, 1.5, 2.0, 4.0])
        np.testing.assert_allclose(counts, [2.0, 2.0, 4.0])

    def test_density_integrates_to_one(self, normal_sample):
        result = histogram(normal_sample, bins=40, density=True)
        assert result.integral() == pytest.approx(1.0, rel=1e-9)
        assert result.density

    def test_weighted_density(self, rng):
        x = rng.uniform(size=200)
        w = rng.uniform(size=200)
        result = histogram(x, bins=8, weights=w, density=True)
        assert np.sum(result.counts * result.width) == pytest.approx(1.0, rel=1e-9)

    def test_density_matches_numpy(self, normal_sample):
        result = histogram(normal_sample, bins=15, density=True)
        expected, _ = np.histogram(normal_sample, bins=15, range=result.range, density=True)
        np.testing.assert_allclose(result.counts, expected, rtol=1e-12)

    def test_zero_mass_density(self):
        with pytest.raises(ValidationError, match="zero"):
            histogram([10.0], bins=2, range=(0.0, 1.0), density=True)


class TestValidation:

    def test_weights_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            histogram([1.0, 2.0, 3.0], weights=[1.0, 2.0])

    def test_bins_must_be_positive(self):
        with pytest.raises(ValidationError, match="bins"):
            histogram([1.0, 2.0], bins=0)

    def test_bins_must_be_int(self):
        with pytest.raises(ValidationError, match="bins"):
            histogram([1.0, 2.0], bins=2.5)

    def test_inverted_range(self):
        with pytest.raises(ValidationError, match="range"):
            histogram([1.0, 2.0], range=(3.0, 1.0))

    def test_empty_sample_needs_range(self):
        with pytest.raises(ValidationError, match="at least 1"):
            histogram([])

    def test_empty_sample_with_range(self):
        _, counts = histogram([], bins=3, range=(0.0, 1.0))
        np.testing.assert_array_equal(counts, [0.0, 0.0, 0.0])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            histogram([1.0, np.nan])


class TestSolution:

    def test_design_passthrough(self):
        design = HistogramDesign.from_array([1, 2, 3], bins=3)
        result = histogram(design)
        assert result.bins == 3
        assert result.backend_name == 'cpu_histogram'
        assert result.info['range_given'] is False

    def test_summary_and_repr(self):
        result = histogram([1, 2, 3], bins=3)
        assert "count" in result.summary()
        assert repr(result).startswith("HistogramSolution(bins=3")
