"""
Random permutations and resamples.

All functions take ``rng`` as None (process-default generator), an
integer seed, or any RandomSource. Only ``rng.integers`` is used, so a
fixed seed gives the same draws on every platform numpy supports.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysample.core.exceptions import ValidationError
from pysample.core.protocols import RandomSource
from pysample.core.random import resolve_rng
from pysample.core.validation import check_positive_int


def _as_population(array: ArrayLike, name: str) -> NDArray[Any]:
    arr = np.asarray(array)
    if arr.ndim == 0:
        raise ValidationError(f"{name}: expected a sequence, got a scalar")
    # numpy turns [1, "a"] into strings; keep the caller's elements instead
    if (
        arr.ndim == 1
        and arr.dtype.kind in 'US'
        and not isinstance(array, np.ndarray)
        and not all(isinstance(v, (str, bytes)) for v in array)
    ):
        arr = np.empty(len(arr), dtype=object)
        for i, v in enumerate(array):
            arr[i] = v
    return arr


def _fisher_yates(arr: NDArray[Any], rng: RandomSource) -> NDArray[Any]:
    """In-place Fisher-Yates along the first axis."""
    for i in range(len(arr) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        if j != i:
            arr[[i, j]] = arr[[j, i]]
    return arr


def shuffle(
    array: ArrayLike,
    *,
    rng: RandomSource | int | None = None,
) -> NDArray[Any]:
    """
    Uniformly random permutation by Fisher-Yates. O(n).

    For i from the last index down to 1, element i is swapped with an
    element drawn uniformly from positions [0, i]. Works on a copy: the
    caller's array is left untouched. Multi-dimensional input is
    permuted along its first axis.

    Parameters
    ----------
    array : array-like
        Population to permute.
    rng : RandomSource, int, or None
        Random source or seed.

    Returns
    -------
    NDArray
        Permuted copy.
    """
    source = resolve_rng(rng)
    out = np.array(_as_population(array, "array"), copy=True)
    return _fisher_yates(out, source)


def bootstrap_indices(
    n: int,
    *,
    rng: RandomSource | int | None = None,
    size: int | None = None,
) -> NDArray[np.intp]:
    """
    Indices for a with-replacement resample of a population of size n.

    Useful for resampling several aligned arrays with the same draw.

    Raises
    ------
    ValidationError
        If n or size is negative, or size > 0 with an empty population.
    """
    n = check_positive_int(n, 0, "n")
    size = n if size is None else check_positive_int(size, 0, "size")
    if n == 0 and size > 0:
        raise ValidationError(
            f"size: cannot draw {size} element(s) from an empty population"
        )
    source = resolve_rng(rng)
    if size == 0:
        return np.empty(0, dtype=np.intp)
    return np.asarray(source.integers(0, n, size=size), dtype=np.intp)


def sample(
    array: ArrayLike,
    *,
    rng: RandomSource | int | None = None,
    replace: bool = False,
    size: int | None = None,
) -> NDArray[Any]:
    """
    Draw a sample from a population, with or without replacement.

    Parameters
    ----------
    array : array-like
        Population.
    rng : RandomSource, int, or None
        Random source or seed.
    replace : bool
        False (default): shuffle and keep the first ``size`` elements, so
        each element is drawn at most once. True: ``size`` independent
        uniform draws from the population.
    size : int, optional
        Number of elements to draw. Defaults to the population size.

    Returns
    -------
    NDArray
        Drawn elements, a new array.

    Raises
    ------
    ValidationError
        If size is negative, exceeds the population without replacement,
        or is positive for an empty population.
    """
    population = _as_population(array, "array")
    n = len(population)
    size = n if size is None else check_positive_int(size, 0, "size")

    if replace:
        return population[bootstrap_indices(n, rng=rng, size=size)]

    if size > n:
        raise ValidationError(
            f"size: cannot draw {size} elements without replacement "
            f"from a population of {n}"
        )
    return shuffle(population, rng=rng)[:size]
