"""
Histogram solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pysample.core.result import Result


@dataclass(frozen=True)
class HistogramParams:
    """
    Parameter payload for a histogram.

    values holds counts (or summed weights), or densities when
    density=True. centers and values have one entry per bin; edges has
    bins + 1 entries.
    """
    centers: NDArray[np.floating[Any]]
    edges: NDArray[np.floating[Any]]
    values: NDArray[np.floating[Any]]
    width: float
    density: bool
    n_outside: int


@dataclass
class HistogramSolution:
    """
    User-facing histogram.

    Unpacks as ``(centers, counts)``:

        >>> centers, counts = histogram(x, bins=20)
    """
    _result: Result[HistogramParams]

    @property
    def centers(self) -> NDArray[np.floating[Any]]:
        """Bin midpoints, shape (bins,)."""
        return self._result.params.centers

    @property
    def edges(self) -> NDArray[np.floating[Any]]:
        """Bin edges, shape (bins + 1,)."""
        return self._result.params.edges

    @property
    def counts(self) -> NDArray[np.floating[Any]]:
        """Per-bin mass: counts, summed weights, or densities."""
        return self._result.params.values

    @property
    def width(self) -> float:
        return self._result.params.width

    @property
    def bins(self) -> int:
        return len(self._result.params.values)

    @property
    def range(self) -> tuple[float, float]:
        edges = self._result.params.edges
        return float(edges[0]), float(edges[-1])

    @property
    def density(self) -> bool:
        return self._result.params.density

    @property
    def n_outside(self) -> int:
        """Observations that fell outside the range and were not counted."""
        return self._result.params.n_outside

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def integral(self) -> float:
        """Sum of bin values times bin width (1.0 for densities)."""
        return float(np.sum(self.counts) * self.width)

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        yield self.centers
        yield self.counts

    def summary(self) -> str:
        label = "density" if self.density else "count"
        lines = [f"{'center':>14}  {label:>14}"]
        for c, v in zip(self.centers, self.counts):
            lines.append(f"{c:>14.6g}  {v:>14.6g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        lo, hi = self.range
        return (
            f"HistogramSolution(bins={self.bins}, range=({lo:.6g}, {hi:.6g}), "
            f"density={self.density})"
        )
