"""
Quantile and interquartile-range estimation.

continuous_by() is the general entry point; quantile() and iqr() are the
conveniences that use the default S definition. quantiles() evaluates
many probabilities against a single sort.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysample.core.exceptions import ValidationError
from pysample.core.validation import check_choice, check_probability, check_sample
from pysample.order_stats._continuous import ContinuousParam, continuous_quantile


def _sorted_sample(sample: ArrayLike) -> NDArray[np.floating[Any]]:
    return np.sort(check_sample(sample, "sample"), kind='stable')


def continuous_by(
    sample: ArrayLike,
    *,
    param: ContinuousParam | str = ContinuousParam.S,
    p: float = 0.5,
) -> float:
    """
    Estimate the sample quantile for probability p. O(n log n).

    Parameters
    ----------
    sample : array-like
        1D sample of finite values, in any order.
    param : ContinuousParam or str
        Plotting-position definition. Default S (R type 7).
    p : float
        Probability in [0, 1].

    Returns
    -------
    float
        Quantile estimate, within [min(sample), max(sample)].

    Raises
    ------
    ValidationError
        If the sample is empty or non-finite, or p is outside [0, 1].
    """
    definition = check_choice(param, ContinuousParam, "param")
    prob = check_probability(p, "p")
    xs = _sorted_sample(sample)
    return float(continuous_quantile(xs, np.array([prob]), definition)[0])


def quantiles(
    sample: ArrayLike,
    probs: ArrayLike,
    *,
    param: ContinuousParam | str = ContinuousParam.S,
) -> NDArray[np.floating[Any]]:
    """
    Estimate quantiles for several probabilities with one sort.

    Returns
    -------
    NDArray
        Array with the shape of ``probs``.
    """
    definition = check_choice(param, ContinuousParam, "param")
    probs_arr = np.asarray(probs, dtype=np.float64)
    if np.any(np.isnan(probs_arr)) or np.any((probs_arr < 0.0) | (probs_arr > 1.0)):
        bad = probs_arr[np.isnan(probs_arr) | (probs_arr < 0.0) | (probs_arr > 1.0)]
        raise ValidationError(f"probs: must be in [0, 1], got {bad.tolist()}")
    xs = _sorted_sample(sample)
    flat = continuous_quantile(xs, probs_arr.ravel(), definition)
    return flat.reshape(probs_arr.shape)


def iqr(
    sample: ArrayLike,
    *,
    param: ContinuousParam | str = ContinuousParam.S,
) -> float:
    """
    Interquartile range Q(0.75) - Q(0.25) under the given definition.

    Raises
    ------
    ValidationError
        If the sample is empty or non-finite.
    """
    q1, q3 = quantiles(sample, [0.25, 0.75], param=param)
    return float(q3 - q1)


def quantile(sample: ArrayLike, p: float = 0.5) -> float:
    """Sample quantile for probability p using the default S definition."""
    return continuous_by(sample, param=ContinuousParam.S, p=p)
