"""
Input validation for samples, probabilities, counts and option names.

Every public operation validates its arguments here before any work is
done. Out-of-domain input raises ValidationError (DimensionError for
shape problems); nothing is clamped or coerced beyond converting
array-likes to float64.

Messages start with the parameter name and include the offending value:

    p: must be in [0, 1], got 1.5
    sample: requires at least 2 samples, got 1
"""

import math
from enum import Enum
from typing import Any, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysample.core.exceptions import ValidationError, DimensionError

E = TypeVar('E', bound=Enum)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Object arrays (mixed or non-numeric elements), strings and complex
    numbers are rejected; bools and integers are promoted.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype != bool and (
        not np.issubdtype(result.dtype, np.number)
        or np.issubdtype(result.dtype, np.complexfloating)
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Reject NaN and +/-Inf, reporting how many of each were found.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify paired arrays (sample and weights) agree on their first axis.

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_probability(p: float, name: str) -> float:
    """
    Verify p is a probability in the closed interval [0, 1].

    Returns:
        p as a Python float

    Raises:
        ValidationError: If p is NaN or outside [0, 1]
    """
    try:
        value = float(p)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {p!r}") from e
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name}: must be in [0, 1], got {p}")
    return value


def check_positive_int(value: int, minimum: int, name: str) -> int:
    """
    Verify value is an integer no smaller than minimum.

    Raises:
        ValidationError: If value is not integral or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return int(value)


def check_sample(sample: ArrayLike, name: str = "sample", min_samples: int = 1) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a one-dimensional sample of finite observations.

    Combines check_array, check_1d, check_finite and check_min_samples,
    which is the contract every sample-consuming operation shares.
    """
    arr = check_array(sample, name)
    check_1d(arr, name)
    check_min_samples(arr, min_samples, name)
    check_finite(arr, name)
    return arr


def check_choice(value: Any, choices: type[E], name: str) -> E:
    """
    Resolve an enum member from a member or its case-insensitive name.

    ``check_choice('median-unbiased', ContinuousParam, 'param')`` and
    ``check_choice(ContinuousParam.MEDIAN_UNBIASED, ...)`` are equivalent.

    Raises:
        ValidationError: If value names no member of ``choices``
    """
    if isinstance(value, choices):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace('-', '_').replace(' ', '_')
        if key in choices.__members__:
            return choices[key]
    valid = ", ".join(m.name.lower() for m in choices)
    raise ValidationError(f"{name}: unknown value {value!r}, expected one of: {valid}")
