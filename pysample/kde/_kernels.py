"""
Smoothing kernels for density estimation.

A kernel is a weight function K(u) of the standardized distance
u = (g - x_i) / h plus the number of bandwidths beyond the data at which
its mass is negligible, used to pad the evaluation grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats


class Kernel(Enum):
    """Kernel weight functions."""
    GAUSSIAN = 'gaussian'


@dataclass(frozen=True)
class KernelSpec:
    """Weight function and grid cushion of a kernel."""
    weight: Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]
    cut: float


_KERNELS: dict[Kernel, KernelSpec] = {
    # exp(-u^2 / 2) / sqrt(2 pi); 3 sd leaves 0.27% of the mass outside
    Kernel.GAUSSIAN: KernelSpec(weight=sp_stats.norm.pdf, cut=3.0),
}


def kernel_spec(kernel: Kernel) -> KernelSpec:
    return _KERNELS[kernel]
