"""
Kernel density estimate solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pysample.core.result import Result
from pysample.kde._bandwidth import BandwidthRule
from pysample.kde._kernels import Kernel


@dataclass(frozen=True)
class KDEParams:
    """
    Parameter payload for a density estimate.

    grid is strictly increasing with constant spacing; density[i] is the
    estimate at grid[i].
    """
    grid: NDArray[np.floating[Any]]
    density: NDArray[np.floating[Any]]
    bandwidth: float
    kernel: Kernel
    bandwidth_rule: BandwidthRule | None


@dataclass
class KDESolution:
    """
    User-facing kernel density estimate.

    Unpacks as ``(grid, density)``:

        >>> grid, pdf = estimate_pdf(x, points=256)
    """
    _result: Result[KDEParams]

    @property
    def grid(self) -> NDArray[np.floating[Any]]:
        """Evaluation points, shape (points,)."""
        return self._result.params.grid

    @property
    def density(self) -> NDArray[np.floating[Any]]:
        """Density estimates at the grid points, shape (points,)."""
        return self._result.params.density

    @property
    def bandwidth(self) -> float:
        return self._result.params.bandwidth

    @property
    def kernel(self) -> Kernel:
        return self._result.params.kernel

    @property
    def bandwidth_rule(self) -> BandwidthRule | None:
        """Rule that produced the bandwidth, None for a fixed bandwidth."""
        return self._result.params.bandwidth_rule

    @property
    def step(self) -> float:
        """Grid spacing."""
        grid = self._result.params.grid
        return float(grid[1] - grid[0])

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
        """Riemann sum of the density over the grid; close to 1."""
        return float(np.sum(self.density) * self.step)

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        yield self.grid
        yield self.density

    def summary(self) -> str:
        rule = self.bandwidth_rule.value if self.bandwidth_rule is not None else "fixed"
        peak = int(np.argmax(self.density))
        lines = [
            f"Kernel density estimate ({self.kernel.value} kernel)",
            f"  n:          {self.info.get('n')}",
            f"  bandwidth:  {self.bandwidth:.6g} ({rule})",
            f"  grid:       [{self.grid[0]:.6g}, {self.grid[-1]:.6g}], {len(self.grid)} points",
            f"  mode:       {self.grid[peak]:.6g} (density {self.density[peak]:.6g})",
            f"  integral:   {self.integral():.6f}",
        ]
        for w in self.warnings:
            lines.append(f"  warning:    {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"KDESolution(points={len(self.grid)}, kernel={self.kernel.value!r}, "
            f"bandwidth={self.bandwidth:.6g})"
        )
