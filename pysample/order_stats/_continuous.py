"""
Continuous sample quantile estimators.

The six continuous definitions of Hyndman & Fan (1996) share one formula.
With order statistics x_1 <= ... <= x_n and plotting-position constants
(a, b):

    h = a + p * (n + 1 - a - b),  clamped to [1, n]
    j = floor(h),  g = h - j
    Q(p) = x_j + g * (x_{j+1} - x_j)     (x_{n+1} := x_n)

Each ContinuousParam names one (a, b) pair. The R quantile() type number
is given for cross-checking.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class ContinuousParam(Enum):
    """Plotting-position definition for continuous quantile estimation."""
    CADPW = 'cadpw'                      # R type 4, linear interpolation of the ECDF
    HAZEN = 'hazen'                      # R type 5
    SPSS = 'spss'                        # R type 6, Weibull's definition
    S = 's'                              # R type 7, n - 1 intervals (default)
    MEDIAN_UNBIASED = 'median_unbiased'  # R type 8
    NORMAL_UNBIASED = 'normal_unbiased'  # R type 9, Blom

    @property
    def constants(self) -> tuple[float, float]:
        """The (a, b) plotting-position constants."""
        return _PLOTTING_POSITIONS[self]


_PLOTTING_POSITIONS: dict[ContinuousParam, tuple[float, float]] = {
    ContinuousParam.CADPW: (0.0, 1.0),
    ContinuousParam.HAZEN: (0.5, 0.5),
    ContinuousParam.SPSS: (0.0, 0.0),
    ContinuousParam.S: (1.0, 1.0),
    ContinuousParam.MEDIAN_UNBIASED: (1.0 / 3.0, 1.0 / 3.0),
    ContinuousParam.NORMAL_UNBIASED: (3.0 / 8.0, 3.0 / 8.0),
}

# R fuzz factor: 4 * machine epsilon
_FUZZ = 4.0 * np.finfo(np.float64).eps


def continuous_quantile(
    xs: NDArray[np.floating[Any]],
    probs: NDArray[np.floating[Any]],
    param: ContinuousParam,
) -> NDArray[np.floating[Any]]:
    """
    Quantiles of a sorted sample for an array of probabilities.

    Parameters
    ----------
    xs : NDArray
        1D ascending sample, at least one element, no NaN.
    probs : NDArray
        Probabilities in [0, 1].
    param : ContinuousParam
        Plotting-position definition.

    Returns
    -------
    NDArray
        One quantile per probability, each within [xs[0], xs[-1]].
    """
    n = len(xs)
    probs = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    if n == 1:
        return np.full(probs.shape, xs[0])

    a, b = param.constants
    h = a + probs * (n + 1.0 - a - b)
    h = np.clip(h, 1.0, float(n))

    j = np.floor(h + _FUZZ)
    g = h - j
    # Rounding just below an integer position is treated as exact
    g = np.where(np.abs(g) < _FUZZ, 0.0, g)
    g = np.clip(g, 0.0, 1.0)

    lo_idx = np.clip(j.astype(np.intp) - 1, 0, n - 1)
    hi_idx = np.minimum(lo_idx + 1, n - 1)
    lo = xs[lo_idx]
    hi = xs[hi_idx]
    return np.clip((1.0 - g) * lo + g * hi, lo, hi)
