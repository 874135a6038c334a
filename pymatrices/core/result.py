"""
Generic result container for pymatrices computations.

The Result class provides a standardized envelope for backend output.
This enables shared tooling for timing, diagnostics and reproducibility
while allowing each computation to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, matrix size, counters)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions active when the result was produced."""
    import scipy

    from pymatrices import __version__

    return {
        'pymatrices_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The computation-specific parameter payload type

    Attributes:
        params: Computation-specific payload (determinant value, etc.)
        info: Structured metadata (method, size, counters)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=DeterminantParams(value=np.int64(-2)),
        ...     info={'method': 'cofactor', 'n': 2, 'base_cases': 1},
        ...     timing={'total_seconds': 1e-5, 'expansion': 8e-6},
        ...     backend_name='cofactor'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
