"""
Text rendering for Matrix.

    2 x 3
    |1	2	3|
    |4	5	6|
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


CELL_SEPARATOR = '\t'
ROW_DELIMITER = '|'


def format_grid(data: NDArray[Any]) -> str:
    """Render a 2D array as a dimension header plus one delimited line per row."""
    rows, cols = data.shape
    lines = [f"{rows} x {cols}"]
    for row in data:
        cells = CELL_SEPARATOR.join(str(cell) for cell in row)
        lines.append(f"{ROW_DELIMITER}{cells}{ROW_DELIMITER}")
    return '\n'.join(lines)


def format_repr(data: NDArray[Any]) -> str:
    """Constructor-style representation."""
    return f"Matrix({data.tolist()!r}, dtype={np.dtype(data.dtype).name})"
