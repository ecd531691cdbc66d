"""Human-readable renderings of dense and symmetric matrices.

``format_matrix`` produces the compact bracketed layout used in error
messages; ``matrix_table`` produces an indexed table for reports.
"""

from __future__ import annotations

from typing import Any, cast

import numpy as np
from tabulate import tabulate

__all__ = ["format_matrix", "matrix_table"]

_SEP = "  "


def _format_value(val: float) -> str:
    # shortest round-trip representation, integral values without ".0"
    s = repr(float(val))
    if s.endswith(".0"):
        s = s[:-2]
    return s


def _as_2d(m: Any) -> np.ndarray:
    A = np.asarray(m, dtype=np.float64)
    if A.ndim == 1:
        A = A.reshape(-1, 1)
    if A.ndim != 2:
        raise ValueError(f"expected a 1-D or 2-D array, got ndim={A.ndim}")
    return A


def format_matrix(m: Any) -> str:
    """Render ``m`` with bracket glyphs and per-column (squeezed) widths.

    Examples
    --------
    >>> print(format_matrix([[1.2, 3.4], [4.5, 6.7]]))
    ⎡1.2  3.4⎤
    ⎣4.5  6.7⎦

    """
    A = _as_2d(m)
    rows, cols = A.shape
    if rows == 0 or cols == 0:
        return "[]"
    cells = [[_format_value(A[i, j]) for j in range(cols)] for i in range(rows)]
    widths = [max(len(cells[i][j]) for i in range(rows)) for j in range(cols)]
    lines = []
    for i, row in enumerate(cells):
        body = _SEP.join(cell.rjust(widths[j]) for j, cell in enumerate(row))
        if rows == 1:
            left, right = "[", "]"
        elif i == 0:
            left, right = "⎡", "⎤"
        elif i == rows - 1:
            left, right = "⎣", "⎦"
        else:
            left, right = "⎢", "⎥"
        lines.append(f"{left}{body}{right}")
    return "\n".join(lines)


def matrix_table(m: Any, *, floatfmt: str = "g", tablefmt: str = "simple") -> str:
    """Tabulate ``m`` with row and column indices as headers."""
    A = _as_2d(m)
    headers = [str(j) for j in range(A.shape[1])]
    return cast(
        "str",
        tabulate(A, headers=headers, showindex=True, floatfmt=floatfmt, tablefmt=tablefmt),
    )
