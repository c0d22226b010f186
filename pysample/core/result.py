"""
Generic result container for all PySample computations.

The Result class provides a standardized envelope that all component
results use. This enables shared tooling for timing, reproducibility,
and reporting while allowing components to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (strategy, bandwidth rule, ...)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for sample computations.

    Type Parameters:
        P: The component-specific parameter payload type

    Attributes:
        params: Component-specific payload (ranks, bin counts, density, ...)
        info: Structured metadata (method, options, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Algorithm identification for reproducibility

    Examples:
        >>> Result(
        ...     params=RankParams(ranks=r, correction=1.0, ties=()),
        ...     info={'ties_strategy': 'average'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_rank'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=dict)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
