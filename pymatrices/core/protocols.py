"""
Core protocols for pymatrices.

These define structural interfaces that backend implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that a backend only needs the right shape, not a common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pymatrices.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result.

    Backends are stateless: all input arrives via the design. This makes
    them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cofactor', 'lu_elimination'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
