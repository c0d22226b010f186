"""
HistogramDesign: validated inputs for uniform-width histograms.

Resolves the bin range up front so the backend only has to count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysample.core.exceptions import ValidationError
from pysample.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_finite,
    check_positive_int,
    check_sample,
)


def default_range(
    x: NDArray[np.floating[Any]],
    bins: int,
) -> tuple[float, float]:
    """
    Bin range derived from the data: (min - k, max + k).

    k = (max - min) / (bins - 1) / 2 is half a bin of the grid whose
    bins are centred on min and max, so both extremes fall inside the
    outermost bins instead of on their edges. k = 0 for a single bin.
    A constant sample gets the interval x +/- |x|/10, or x +/- 1 when
    |x|/10 is below 1e-6.

    Follows the range() helper of Bryan O'Sullivan's Haskell
    ``statistics`` package.
    """
    lo = float(np.min(x))
    hi = float(np.max(x))
    if lo == hi:
        a = abs(lo) / 10.0
        if a < 1e-6:
            return lo - 1.0, lo + 1.0
        return lo - a, lo + a
    k = 0.0 if bins == 1 else (hi - lo) / (bins - 1) / 2.0
    return lo - k, hi + k


@dataclass(frozen=True)
class HistogramDesign:
    """
    Frozen design for histogram binning.

    Attributes:
        x: Sample, shape (n,).
        weights: Per-observation weights, shape (n,), or None.
        bins: Number of equal-width bins.
        lo, hi: Closed range covered by the bins.
        range_given: Whether the range came from the caller.
        density: Normalize to a density integrating to 1.
    """
    x: NDArray[np.floating[Any]]
    weights: NDArray[np.floating[Any]] | None
    bins: int
    lo: float
    hi: float
    range_given: bool
    density: bool

    @classmethod
    def from_array(
        cls,
        sample: ArrayLike,
        *,
        bins: int = 10,
        range: tuple[float, float] | None = None,
        weights: ArrayLike | None = None,
        density: bool = False,
    ) -> HistogramDesign:
        """
        Build a HistogramDesign with validation.

        Raises:
            ValidationError: Empty sample without an explicit range,
                bins < 1, or an invalid range.
            DimensionError: weights length differs from the sample.
        """
        bins = check_positive_int(bins, 1, "bins")
        x = check_sample(sample, "sample", min_samples=0 if range is not None else 1)

        w = None
        if weights is not None:
            w = check_array(weights, "weights")
            check_1d(w, "weights")
            check_consistent_length(x, w, names=("sample", "weights"))
            check_finite(w, "weights")

        if range is None:
            lo, hi = default_range(x, bins)
        else:
            try:
                lo, hi = (float(v) for v in range)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"range: expected a (lo, hi) pair, got {range!r}") from e
            if not (math.isfinite(lo) and math.isfinite(hi)):
                raise ValidationError(f"range: bounds must be finite, got ({lo}, {hi})")
            if lo >= hi:
                raise ValidationError(f"range: lo must be < hi, got ({lo}, {hi})")

        return cls(
            x=x,
            weights=w,
            bins=bins,
            lo=lo,
            hi=hi,
            range_given=range is not None,
            density=bool(density),
        )

    @property
    def n(self) -> int:
        return len(self.x)

    @property
    def width(self) -> float:
        return (self.hi - self.lo) / self.bins

    def __repr__(self) -> str:
        weighted = ", weighted" if self.weights is not None else ""
        return (
            f"HistogramDesign(n={self.n}, bins={self.bins}, "
            f"range=({self.lo:.6g}, {self.hi:.6g}){weighted})"
        )
