"""
Tolerance tiers for numerical validation.

Defines precision expectations for different compute paths:
- CPU FP64 (reference): machine precision match with R / scipy
- GPU FP32: relaxed for single-precision kernel sums

Used by the test suite and recorded by the GPU density backend.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: must match R to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches R exactly',
)

# GPU with FP32 (consumer GPUs, MPS)
GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision, statistically equivalent',
)

# Riemann sum of a density over its evaluation grid
DENSITY_INTEGRAL = ToleranceTier(
    rtol=1e-2,
    atol=1e-2,
    name='density_integral',
    description='Discretized integral of a kernel density estimate',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if 'gpu' in backend_name:
        return GPU_FP32
    return CPU_FP64
