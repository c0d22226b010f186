"""
Core protocols for PySample.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right methods qualifies: numpy's Generator is a
RandomSource without inheriting from anything here.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from pysample.core.result import Result

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class RandomSource(Protocol):
    """
    Capability interface for a seedable source of uniform variates.

    Resampling needs only "next uniform integer in [low, high)"; callers
    that simulate continuous quantities use "next uniform double in
    [0, 1)". numpy.random.Generator satisfies both.

    Sources are stateful: each draw advances them. Sharing one instance
    across threads requires external synchronization.
    """

    def integers(self, low: Any, high: Any = None, size: Any = None) -> Any:
        """Uniform integers in [low, high)."""
        ...

    def random(self, size: Any = None) -> Any:
        """Uniform doubles in [0, 1)."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a component design and produces a Result with
    that component's parameter payload. Backends are stateless; all
    configuration travels in the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_kde', 'gpu_kde_fp32'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
