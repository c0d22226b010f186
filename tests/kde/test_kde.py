"""
Tests for estimate_pdf().

Validates grid construction, the direct-summation estimate against
scipy.stats.gaussian_kde at the same bandwidth, normalization, and the
degenerate-sample policy.
"""

from __future__ import annotations

import numpy as np
import pytest
from scipy import stats as sp_stats

from pysample.kde import estimate_pdf, Kernel, BandwidthRule, KDEDesign
from pysample.core.compute.tolerances import CPU_FP64, DENSITY_INTEGRAL
from pysample.core.exceptions import ValidationError, DegenerateSampleError


class TestGrid:

    def test_evenly_spaced_increasing(self, normal_sample):
        grid, _ = estimate_pdf(normal_sample, points=300)
        steps = np.diff(grid)
        assert grid.shape == (300,)
        assert np.all(steps > 0)
        np.testing.assert_allclose(steps, steps[0], rtol=1e-9)

    def test_bounds_cushion_three_bandwidths(self, rng):
        x = rng.standard_normal(100)
        result = estimate_pdf(x, points=64)
        assert result.grid[0] == pytest.approx(x.min() - 3 * result.bandwidth)
        assert result.grid[-1] == pytest.approx(x.max() + 3 * result.bandwidth)

    def test_default_points(self, rng):
        grid, density = estimate_pdf(rng.standard_normal(50))
        assert len(grid) == 512
        assert len(density) == 512


class TestDensity:

    def test_integrates_to_one(self, normal_sample):
        result = estimate_pdf(normal_sample)
        assert result.integral() == pytest.approx(1.0, abs=DENSITY_INTEGRAL.atol)

    def test_riemann_sum(self, normal_sample):
        grid, density = estimate_pdf(normal_sample, bandwidth=BandwidthRule.SCOTT)
        assert np.sum(density) * (grid[1] - grid[0]) == pytest.approx(1.0, abs=1e-2)

    def test_non_negative(self, rng):
        _, density = estimate_pdf(rng.exponential(size=200))
        assert np.all(density >= 0.0)

    def test_matches_scipy_gaussian_kde(self, rng):
        x = rng.standard_normal(300)
        result = estimate_pdf(x, points=128)
        # gaussian_kde scales its factor by the sample sd (ddof=1)
        kde = sp_stats.gaussian_kde(x, bw_method=result.bandwidth / np.std(x, ddof=1))
        np.testing.assert_allclose(
            result.density, kde(result.grid), rtol=1e-8, atol=CPU_FP64.atol,
        )

    def test_direct_formula(self):
        x = np.array([0.0, 1.0, 3.0])
        result = estimate_pdf(x, bandwidth=0.5, points=7)
        g = result.grid[:, None]
        u = (g - x[None, :]) / 0.5
        expected = np.exp(-0.5 * u ** 2).sum(axis=1) / np.sqrt(2 * np.pi) / (3 * 0.5)
        np.testing.assert_allclose(result.density, expected, rtol=1e-12)

    def test_approximates_standard_normal(self, normal_sample):
        grid, density = estimate_pdf(normal_sample)
        near_zero = np.argmin(np.abs(grid))
        assert density[near_zero] == pytest.approx(sp_stats.norm.pdf(0.0), abs=0.03)

    def test_blocked_summation_consistent(self, rng):
        # large enough that the grid is evaluated in several blocks
        x = rng.standard_normal(5000)
        result = estimate_pdf(x, points=400)
        kde = sp_stats.gaussian_kde(x, bw_method=result.bandwidth / np.std(x, ddof=1))
        np.testing.assert_allclose(result.density, kde(result.grid), rtol=1e-7, atol=1e-12)


class TestOptions:

    def test_names_accepted(self, rng):
        x = rng.standard_normal(40)
        result = estimate_pdf(x, kernel="gaussian", bandwidth="scott")
        assert result.kernel is Kernel.GAUSSIAN
        assert result.bandwidth_rule is BandwidthRule.SCOTT

    def test_fixed_bandwidth(self, rng):
        result = estimate_pdf(rng.standard_normal(40), bandwidth=0.25)
        assert result.bandwidth == 0.25
        assert result.bandwidth_rule is None
        assert result.info['bandwidth_rule'] == 'fixed'

    @pytest.mark.parametrize("bad", [0.0, -1.0, np.inf])
    def test_invalid_fixed_bandwidth(self, bad):
        with pytest.raises(ValidationError, match="bandwidth"):
            estimate_pdf([1.0, 2.0, 3.0], bandwidth=bad)

    def test_unknown_kernel(self):
        with pytest.raises(ValidationError, match="kernel"):
            estimate_pdf([1.0, 2.0, 3.0], kernel="epanechnikov")

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="backend"):
            estimate_pdf([1.0, 2.0, 3.0], backend="tpu")

    def test_design_passthrough(self, rng):
        design = KDEDesign.from_array(rng.standard_normal(30), points=16)
        result = estimate_pdf(design)
        assert len(result.grid) == 16
        assert result.backend_name == 'cpu_kde'


class TestValidation:

    def test_needs_two_observations(self):
        with pytest.raises(ValidationError, match="at least 2"):
            estimate_pdf([1.0])

    def test_points_at_least_two(self):
        with pytest.raises(ValidationError, match="points"):
            estimate_pdf([1.0, 2.0], points=1)

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            estimate_pdf([1.0, np.nan, 2.0])


class TestDegenerateSample:

    def test_fallback_warns(self):
        with pytest.warns(RuntimeWarning, match="bandwidth"):
            result = estimate_pdf(np.full(20, 3.0), points=101)
        assert result.bandwidth > 0
        assert np.all(np.isfinite(result.density))
        assert result.integral() == pytest.approx(1.0, abs=DENSITY_INTEGRAL.atol)
        assert len(result.warnings) == 1

    def test_strict_raises(self):
        with pytest.raises(DegenerateSampleError):
            estimate_pdf(np.full(20, 3.0), strict=True)

    def test_one_ulp_spread_grid_distinct(self):
        x = np.array([1.0] * 10 + [np.nextafter(1.0, 2.0)] * 10)
        with pytest.warns(RuntimeWarning, match="bandwidth"):
            grid, density = estimate_pdf(x)
        steps = np.diff(grid)
        assert np.all(steps > 0)
        np.testing.assert_allclose(steps, steps[0], rtol=1e-9)
        assert len(np.unique(grid)) == 512
        assert np.all(np.isfinite(density))

    def test_one_ulp_spread_strict_raises(self):
        x = np.array([1.0] * 10 + [np.nextafter(1.0, 2.0)] * 10)
        with pytest.raises(DegenerateSampleError):
            estimate_pdf(x, strict=True)


class TestSolution:

    def test_unpacking_and_metadata(self, rng):
        result = estimate_pdf(rng.standard_normal(100), points=32)
        grid, density = result
        assert grid is result.grid
        assert density is result.density
        assert result.info['n'] == 100
        assert 'kernel_sum' in result.timing
        assert result.step == pytest.approx(grid[1] - grid[0])

    def test_summary_and_repr(self, rng):
        result = estimate_pdf(rng.standard_normal(100), points=32)
        text = result.summary()
        assert "bandwidth" in text and "integral" in text
        assert repr(result).startswith("KDESolution(points=32")
