"""
Core infrastructure for PySample.

This module provides shared abstractions and utilities used by all
component subpackages (ranks, order_stats, binning, resampling, kde).

Key components:
    protocols: RandomSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Random source resolution
    compute: Device detection, timing, tolerance tiers
"""

from pysample.core.protocols import RandomSource, Backend
from pysample.core.result import Result
from pysample.core.random import resolve_rng
from pysample.core.exceptions import (
    PySampleError,
    ValidationError,
    DomainError,
    DimensionError,
    NumericalError,
    DegenerateSampleError,
)

__all__ = [
    # Protocols
    "RandomSource",
    "Backend",
    # Result
    "Result",
    # Random
    "resolve_rng",
    # Exceptions
    "PySampleError",
    "ValidationError",
    "DomainError",
    "DimensionError",
    "NumericalError",
    "DegenerateSampleError",
]
