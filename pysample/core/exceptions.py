"""
Exception hierarchy for PySample.

All exceptions inherit from PySampleError to allow catching any
library-specific error. Component-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySampleError(Exception):
    """Base exception for all PySample errors."""
    pass


class ValidationError(PySampleError):
    """
    Input validation failed.

    Raised when user-provided inputs fall outside the domain of an
    operation: empty samples, probabilities outside [0, 1], sample sizes
    larger than the population, invalid bin counts or ranges.
    """
    pass


# Name used by rank-based and resampling callers for out-of-domain input.
DomainError = ValidationError


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when paired arrays (sample and weights) have inconsistent lengths.
    """
    pass


class NumericalError(PySampleError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateSampleError(NumericalError):
    """
    Sample has zero or near-zero spread.

    Raised when a scale estimate used by a smoothing heuristic (standard
    deviation, interquartile range) is zero, so that the derived bandwidth
    would collapse to zero.

    Attributes:
        statistic: Name of the degenerate scale estimate
        value: Its computed value
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.value = value
