"""
Shared compute infrastructure for pymatrices.

This module provides timing utilities and tolerance tiers that are shared
across backends.

Submodules:
    timing: Execution timing utilities
    tolerances: Per-dtype tolerance tiers
"""

from pymatrices.core.compute.timing import Timer
from pymatrices.core.compute.tolerances import (
    EXACT,
    FP16,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "FP16",
    "select_tolerance",
]
