"""
Solver dispatch for histograms.
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pysample.binning.design import HistogramDesign
from pysample.binning.solution import HistogramParams, HistogramSolution
from pysample.core.protocols import Backend
from pysample.binning.backends.cpu import CPUHistogramBackend


def histogram(
    sample: ArrayLike | HistogramDesign,
    *,
    bins: int = 10,
    range: tuple[float, float] | None = None,
    weights: ArrayLike | None = None,
    density: bool = False,
) -> HistogramSolution:
    """
    Histogram with uniform bin widths. O(n log bins).

    Parameters
    ----------
    sample : array-like or HistogramDesign
        1D sample of finite values.
    bins : int
        Number of equal-width bins, >= 1.
    range : (float, float), optional
        Closed interval covered by the bins. Defaults to
        ``(min - k, max + k)`` with ``k = (max - min) / (bins - 1) / 2``,
        which keeps the extremes away from the outer bin edges.
        Observations outside an explicit range are dropped with a warning.
    weights : array-like, optional
        Per-observation weights, same length as ``sample``. Bins then hold
        summed weights instead of counts.
    density : bool
        Divide each bin by ``total_mass * bin_width`` so the histogram
        integrates to 1.

    Returns
    -------
    HistogramSolution
        Unpacks as ``(centers, counts)``.

    Raises
    ------
    ValidationError
        Empty sample without an explicit range, bins < 1, invalid range,
        or zero total mass with density=True.
    DimensionError
        weights length differs from the sample.
    """
    if isinstance(sample, HistogramDesign):
        design = sample
    else:
        design = HistogramDesign.from_array(
            sample, bins=bins, range=range, weights=weights, density=density,
        )

    backend: Backend[HistogramDesign, HistogramParams] = CPUHistogramBackend()
    result = backend.solve(design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return HistogramSolution(_result=result)
