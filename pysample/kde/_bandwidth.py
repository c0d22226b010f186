"""
Rule-of-thumb bandwidth selection.

    h = c * min(sd, IQR / 1.34) * n^(-1/5)

with c = 0.9 (Silverman) or c = 1.06 (Scott). sd is Bessel-corrected and
IQR uses the default (S) quantile definition, as R's bw.nrd0 and bw.nrd do.

When min(sd, IQR / 1.34) is zero, or so small relative to the data that
grid points min - 3h .. max + 3h would not be distinct floats, the sample
has no usable spread. The fallback follows bw.nrd0: the other scale
estimate if usable, then the magnitude of the first observation, then 1.

Reference:
    Silverman, B.W. (1986) "Density Estimation for Statistics and Data
    Analysis", Chapman and Hall, London, eq. (3.31).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysample.core.exceptions import DegenerateSampleError
from pysample.order_stats._continuous import ContinuousParam, continuous_quantile


class BandwidthRule(Enum):
    """Bandwidth selection rules."""
    SILVERMAN = 'silverman'
    SCOTT = 'scott'

    @property
    def factor(self) -> float:
        return _FACTORS[self]


_FACTORS: dict[BandwidthRule, float] = {
    BandwidthRule.SILVERMAN: 0.9,
    BandwidthRule.SCOTT: 1.06,
}


def robust_scale(x: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """Standard deviation and IQR / 1.34 of a sample (n >= 2)."""
    sd = float(np.std(x, ddof=1))
    q1, q3 = continuous_quantile(np.sort(x), np.array([0.25, 0.75]), ContinuousParam.S)
    return sd, float(q3 - q1) / 1.34


# Smallest usable scale, in ulps of the largest |x|
_RESOLUTION_ULPS = 1e4


def resolution_floor(x: NDArray[np.floating[Any]]) -> float:
    """
    Scale at or below which a bandwidth cannot separate grid points.

    A 512-point grid over [min - 3h, max + 3h] with h derived from a
    scale of _RESOLUTION_ULPS ulps still steps by several ulps of the
    data magnitude, for n up to 10^6.
    """
    magnitude = float(np.max(np.abs(x)))
    return _RESOLUTION_ULPS * float(np.spacing(magnitude))


def select_bandwidth(
    x: NDArray[np.floating[Any]],
    rule: BandwidthRule,
    *,
    strict: bool = False,
) -> tuple[float, list[str]]:
    """
    Bandwidth for a sample under a rule of thumb.

    Parameters
    ----------
    x : NDArray
        1D finite sample, n >= 2.
    rule : BandwidthRule
    strict : bool
        Raise instead of falling back when the spread is zero or below
        resolution_floor(x).

    Returns
    -------
    (float, list of str)
        Bandwidth and any fallback warnings.

    Raises
    ------
    DegenerateSampleError
        If strict and min(sd, IQR / 1.34) is not above resolution_floor(x).
    """
    warnings_list: list[str] = []
    sd, spread = robust_scale(x)
    scale = min(sd, spread)
    floor = resolution_floor(x)

    if not scale > floor:
        if strict:
            raise DegenerateSampleError(
                f"bandwidth: sample spread is zero or below the data's float "
                f"resolution (sd={sd:.6g}, IQR/1.34={spread:.6g}, floor={floor:.6g})",
                statistic='min(sd, IQR/1.34)',
                value=scale,
            )
        if max(sd, spread) > floor:
            scale = max(sd, spread)
            source = 'sd' if sd >= spread else 'IQR/1.34'
        elif abs(x[0]) > floor:
            scale = abs(float(x[0]))
            source = '|x[0]|'
        else:
            scale = 1.0
            source = '1'
        warnings_list.append(
            f"bandwidth: min(sd, IQR/1.34) is zero or unresolvable, "
            f"using scale {source}={scale:.6g}"
        )

    h = rule.factor * scale * len(x) ** (-0.2)
    return h, warnings_list
