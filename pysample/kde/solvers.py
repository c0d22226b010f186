"""
Solver dispatch for kernel density estimation.
"""

from __future__ import annotations

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pysample.core.compute.device import select_device
from pysample.core.exceptions import ValidationError
from pysample.core.protocols import Backend
from pysample.kde._bandwidth import BandwidthRule
from pysample.kde._kernels import Kernel
from pysample.kde.design import KDEDesign
from pysample.kde.solution import KDEParams, KDESolution
from pysample.kde.backends.cpu import CPUKDEBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']


def _get_backend(backend: BackendChoice) -> Backend[KDEDesign, KDEParams]:
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUKDEBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from pysample.kde.backends.gpu import GPUKDEBackend
            return GPUKDEBackend(device=device)
        return CPUKDEBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pysample.kde.backends.gpu import GPUKDEBackend
        return GPUKDEBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def estimate_pdf(
    sample: ArrayLike | KDEDesign,
    *,
    kernel: Kernel | str = Kernel.GAUSSIAN,
    bandwidth: BandwidthRule | str | float = BandwidthRule.SILVERMAN,
    points: int = 512,
    strict: bool = False,
    backend: BackendChoice = 'cpu',
) -> KDESolution:
    """
    Kernel density estimate on a uniform grid. O(n * points).

    The grid spans ``[min - 3h, max + 3h]`` for the Gaussian kernel, and
    the estimate at each grid point g is
    ``(1 / (n h)) * sum_i K((g - x_i) / h)``.

    Parameters
    ----------
    sample : array-like or KDEDesign
        1D sample of finite values, n >= 2.
    kernel : Kernel or str
        Kernel weight function. Default Gaussian.
    bandwidth : BandwidthRule, str, or float
        'silverman' (default): ``0.9 * min(sd, IQR/1.34) * n^(-1/5)``.
        'scott': same with factor 1.06. A positive number is used as the
        bandwidth directly.
    points : int
        Number of grid points, >= 2.
    strict : bool
        Raise DegenerateSampleError when the sample has zero spread
        instead of falling back to a substitute scale.
    backend : str
        'cpu' (default, float64 reference), 'gpu', or 'auto'.

    Returns
    -------
    KDESolution
        Unpacks as ``(grid, density)``.

    Raises
    ------
    ValidationError
        n < 2, points < 2, unknown kernel, rule or backend.
    DegenerateSampleError
        strict=True and min(sd, IQR/1.34) is zero.
    """
    if isinstance(sample, KDEDesign):
        design = sample
    else:
        design = KDEDesign.from_array(
            sample, kernel=kernel, bandwidth=bandwidth, points=points, strict=strict,
        )

    result = _get_backend(backend).solve(design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return KDESolution(_result=result)
