"""
Determinant backends.

    cofactor:     CofactorBackend, recursive expansion (reference, default)
    elimination:  EliminationBackend, LU factorisation (fast path)
"""

from pymatrices.determinants.backends.cofactor import CofactorBackend
from pymatrices.determinants.backends.elimination import EliminationBackend

__all__ = [
    "CofactorBackend",
    "EliminationBackend",
]
