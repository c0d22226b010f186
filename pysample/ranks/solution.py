"""
Rank solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pysample.core.result import Result
from pysample.ranks._ties import TiesStrategy


@dataclass(frozen=True)
class RankParams:
    """
    Parameter payload for sample ranks.

    ranks are 1-based and index-aligned with the input sample.
    ties holds the lengths of the groups of equal values (length > 1),
    in ascending order of the tied value.
    """
    ranks: NDArray[np.floating[Any]]
    correction: float
    ties: tuple[int, ...]
    ties_strategy: TiesStrategy


@dataclass
class RankSolution:
    """
    User-facing rank result.

    Unpacks as ``(correction, ranks)``:

        >>> correction, ranks = rank([1, 2, 2, 3])
    """
    _result: Result[RankParams]

    @property
    def ranks(self) -> NDArray[np.floating[Any]]:
        """Ranks in input order, shape (n,)."""
        return self._result.params.ranks

    @property
    def correction(self) -> float:
        """Tie-correction factor in (0, 1]; 1.0 when all values are distinct."""
        return self._result.params.correction

    @property
    def ties(self) -> tuple[int, ...]:
        """Sizes of the tied groups."""
        return self._result.params.ties

    @property
    def has_ties(self) -> bool:
        return len(self._result.params.ties) > 0

    @property
    def ties_strategy(self) -> TiesStrategy:
        return self._result.params.ties_strategy

    @property
    def n(self) -> int:
        return len(self._result.params.ranks)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def __iter__(self) -> Iterator[Any]:
        yield self.correction
        yield self.ranks

    def summary(self) -> str:
        lines = [
            f"Ranks (ties: {self.ties_strategy.value})",
            f"  n:          {self.n}",
            f"  tie groups: {len(self.ties)}",
            f"  correction: {self.correction:.6f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RankSolution(n={self.n}, ties_strategy={self.ties_strategy.value!r}, "
            f"correction={self.correction:.6g})"
        )
