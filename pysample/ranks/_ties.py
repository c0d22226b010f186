"""
Tie resolution for sample ranks.

Ranks are assigned by walking a stable sort order and grouping maximal
runs of elements that compare equal. Every element of a run receives the
same rank, chosen by the ties strategy from the run's 1-based positions.

Reference:
    Freeman, P.R. (1970) "Algorithm AS 26: Ranking an array of numbers",
    Applied Statistics, 19, 111-113.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Sequence

import functools
import numpy as np
from numpy.typing import NDArray


class TiesStrategy(Enum):
    """Rank shared by a block of equal elements."""
    AVERAGE = 'average'  # mean of the block's positions (default)
    MIN = 'min'          # smallest position in the block
    MAX = 'max'          # largest position in the block


def natural_cmp(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ordering."""
    return (a > b) - (a < b)


def order_numeric(x: NDArray) -> tuple[NDArray[np.intp], NDArray[np.bool_]]:
    """
    Stable sort order of a numeric array and its run-start mask.

    Returns
    -------
    order : NDArray
        Indices that sort ``x`` ascending; equal values keep input order.
    starts : NDArray of bool
        ``starts[k]`` is True when ``x[order[k]]`` begins a new run of
        equal values.
    """
    order = np.argsort(x, kind='stable')
    xs = x[order]
    starts = np.ones(len(xs), dtype=bool)
    if len(xs) > 1:
        starts[1:] = xs[1:] != xs[:-1]
    return order, starts


def order_by_cmp(
    values: Sequence[Any],
    cmp: Callable[[Any, Any], int],
) -> tuple[NDArray[np.intp], NDArray[np.bool_]]:
    """Same as order_numeric, for arbitrary values under a comparator."""
    n = len(values)
    key = functools.cmp_to_key(lambda i, j: cmp(values[i], values[j]))
    order = np.array(sorted(range(n), key=key), dtype=np.intp)
    starts = np.ones(n, dtype=bool)
    for k in range(1, n):
        starts[k] = cmp(values[order[k - 1]], values[order[k]]) != 0
    return order, starts


def run_lengths(starts: NDArray[np.bool_]) -> NDArray[np.intp]:
    """Lengths of the runs delimited by a run-start mask."""
    n = len(starts)
    if n == 0:
        return np.empty(0, dtype=np.intp)
    first = np.flatnonzero(starts)
    return np.diff(np.append(first, n))


def assign_ranks(
    order: NDArray[np.intp],
    starts: NDArray[np.bool_],
    strategy: TiesStrategy,
) -> NDArray[np.floating[Any]]:
    """
    Ranks in input order for a sort order and its run-start mask.

    A run occupying sorted positions s+1 .. e (1-based) is ranked
    (s+1+e)/2 under AVERAGE, s+1 under MIN and e under MAX.
    """
    n = len(order)
    ranks = np.empty(n, dtype=np.float64)
    if n == 0:
        return ranks

    lengths = run_lengths(starts)
    first = np.flatnonzero(starts) + 1.0
    last = first + lengths - 1.0

    if strategy is TiesStrategy.AVERAGE:
        per_run = (first + last) / 2.0
    elif strategy is TiesStrategy.MIN:
        per_run = first
    else:
        per_run = last

    ranks[order] = np.repeat(per_run, lengths)
    return ranks


def tie_correction(lengths: Sequence[int] | NDArray, n: int) -> float:
    """
    Tie-correction factor 1 - sum(t^3 - t) / (n^3 - n).

    ``lengths`` are the sizes of the groups of equal values; runs of
    length one contribute nothing. Returns exactly 1.0 when there are no
    ties and for n <= 1.
    """
    if n <= 1:
        return 1.0
    t = np.asarray(lengths, dtype=np.float64)
    t = t[t > 1]
    if len(t) == 0:
        return 1.0
    nf = float(n)
    return float(1.0 - np.sum(t ** 3 - t) / (nf ** 3 - nf))
