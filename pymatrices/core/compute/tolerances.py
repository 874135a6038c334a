"""
Tolerance tiers for numerical comparison.

Defines precision expectations per scalar type:
- Integer dtypes: exact match (arithmetic is exact modulo wraparound)
- float64: near machine precision
- float32 / float16: relaxed for reduced precision

Used by Matrix.allclose, the elimination determinant, and the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer arithmetic is exact: any difference is a real difference
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer scalar types, bit-for-bit equality',
)

# Double precision (and extended precision, which is at least as good)
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, accumulated rounding of a few ulps',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

# Half precision
FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-2,
    name='fp16',
    description='Half precision, only a few significant digits',
)


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select the tolerance tier for a scalar type."""
    resolved = np.dtype(dtype)
    if np.issubdtype(resolved, np.integer):
        return EXACT
    if resolved == np.float16:
        return FP16
    if resolved == np.float32:
        return FP32
    return FP64
