"""
KDEDesign: validated inputs for kernel density estimation.

Bandwidth and grid bounds are resolved at construction so every backend
evaluates the same grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysample.core.exceptions import ValidationError
from pysample.core.validation import check_choice, check_positive_int, check_sample
from pysample.kde._bandwidth import BandwidthRule, select_bandwidth
from pysample.kde._kernels import Kernel, kernel_spec


@dataclass(frozen=True)
class KDEDesign:
    """
    Frozen design for a univariate kernel density estimate.

    Attributes:
        x: Sample, shape (n,).
        kernel: Kernel weight function.
        bandwidth_rule: Rule used to pick h, or None for a fixed h.
        h: Bandwidth.
        points: Number of grid points.
        lo, hi: Grid bounds, min - cut*h and max + cut*h.
        notes: Warnings raised while resolving the bandwidth.
    """
    x: NDArray[np.floating[Any]]
    kernel: Kernel
    bandwidth_rule: BandwidthRule | None
    h: float
    points: int
    lo: float
    hi: float
    notes: tuple[str, ...]

    @classmethod
    def from_array(
        cls,
        sample: ArrayLike,
        *,
        kernel: Kernel | str = Kernel.GAUSSIAN,
        bandwidth: BandwidthRule | str | float = BandwidthRule.SILVERMAN,
        points: int = 512,
        strict: bool = False,
    ) -> KDEDesign:
        """
        Build a KDEDesign with validation.

        ``bandwidth`` is a rule (or its name) or a positive number used
        as h directly.

        Raises:
            ValidationError: n < 2, points < 2, unknown kernel or rule,
                or a non-positive fixed bandwidth.
            DegenerateSampleError: strict and the sample has no spread.
        """
        x = check_sample(sample, "sample", min_samples=2)
        kern = check_choice(kernel, Kernel, "kernel")
        points = check_positive_int(points, 2, "points")

        notes: list[str] = []
        if isinstance(bandwidth, (int, float, np.floating, np.integer)) and not isinstance(bandwidth, bool):
            h = float(bandwidth)
            if not (math.isfinite(h) and h > 0.0):
                raise ValidationError(f"bandwidth: must be a positive finite number, got {bandwidth}")
            rule = None
        else:
            rule = check_choice(bandwidth, BandwidthRule, "bandwidth")
            h, notes = select_bandwidth(x, rule, strict=strict)

        cushion = kernel_spec(kern).cut * h
        return cls(
            x=x,
            kernel=kern,
            bandwidth_rule=rule,
            h=h,
            points=points,
            lo=float(np.min(x)) - cushion,
            hi=float(np.max(x)) + cushion,
            notes=tuple(notes),
        )

    @property
    def n(self) -> int:
        return len(self.x)

    def grid(self) -> NDArray[np.floating[Any]]:
        """Evenly spaced evaluation points over [lo, hi]."""
        return np.linspace(self.lo, self.hi, self.points)

    def __repr__(self) -> str:
        rule = self.bandwidth_rule.value if self.bandwidth_rule is not None else 'fixed'
        return (
            f"KDEDesign(n={self.n}, kernel={self.kernel.value!r}, "
            f"bandwidth={self.h:.6g} ({rule}), points={self.points})"
        )
