"""
Determinant solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np

from pymatrices.core.result import Result

if TYPE_CHECKING:
    from pymatrices.determinants.design import DeterminantDesign


@dataclass(frozen=True)
class DeterminantParams:
    """Parameter payload: the determinant as a scalar of the matrix dtype."""
    value: np.generic


@dataclass
class DeterminantSolution:
    """
    User-facing determinant result.

    Wraps Result[DeterminantParams] and provides convenient accessors.
    """
    _result: Result[DeterminantParams]
    _design: 'DeterminantDesign'

    @property
    def value(self) -> np.generic:
        """Determinant, in the matrix dtype."""
        return self._result.params.value

    @property
    def method(self) -> str:
        """'cofactor' or 'elimination'."""
        return self._result.info['method']

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def dtype(self) -> np.dtype:
        return self._design.dtype

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Short human-readable report."""
        lines = [
            f"Determinant of {self.n} x {self.n} {self.dtype.name} matrix",
            f"  method:  {self.method} ({self.backend_name})",
            f"  value:   {self.value}",
        ]
        if self.timing is not None:
            lines.append(f"  time:    {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (
            f"DeterminantSolution(value={self.value}, method={self.method!r}, "
            f"n={self.n})"
        )
