"""Exception types raised by matrix constructors, reductions and converters.

Every error derives from :class:`MatrixError`, itself a ``ValueError`` so that
callers already guarding NumPy input validation keep working.
"""

from __future__ import annotations

__all__ = [
    "AsymmetryError",
    "DimensionExceededError",
    "ElementCountMismatchError",
    "InvalidDimensionError",
    "InvalidMatrixError",
    "MatrixError",
    "NotSquareError",
    "SymmetryError",
]


class MatrixError(ValueError):
    """Base class for all matutil input errors."""


class InvalidDimensionError(MatrixError):
    """Non-positive (or otherwise unusable) matrix dimension."""

    def __init__(self, dim: str, value: object):
        self.dim = dim
        self.value = value
        name = "rows" if dim == "rows" else "columns"
        super().__init__(f"invalid number of {name}: {value}")


class InvalidMatrixError(MatrixError):
    """Missing or non two-dimensional matrix supplied."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"invalid matrix supplied: {detail}")


class DimensionExceededError(MatrixError):
    """Requested prefix count is larger than the matrix dimension."""

    def __init__(self, dim: str, count: int):
        self.dim = dim
        self.count = count
        if dim == "rows":
            msg = f"row count exceeds matrix rows: {count}"
        else:
            msg = f"column count exceeds matrix columns: {count}"
        super().__init__(msg)


class ElementCountMismatchError(MatrixError):
    """Vector length differs from the number of matrix elements."""

    def __init__(self, n_values: int, n_elements: int):
        self.n_values = n_values
        self.n_elements = n_elements
        super().__init__(
            f"elements count mismatch: Vec: {n_values}, Matrix: {n_elements}",
        )


class SymmetryError(MatrixError):
    """Matrix cannot be represented as a symmetric matrix."""


class NotSquareError(SymmetryError):
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"Matrix must be square: got {rows}x{cols}")


class AsymmetryError(SymmetryError):
    """First off-diagonal pair found outside the symmetry tolerance.

    ``value_t`` is the transposed entry ``M[j, i]`` and ``value`` the original
    entry ``M[i, j]``.
    """

    def __init__(self, i: int, j: int, value_t: float, value: float, detail: str = ""):
        self.i = i
        self.j = j
        self.value_t = value_t
        self.value = value
        msg = f"Matrix not symmetric ({i}, {j}): {value_t!r} != {value!r}"
        if detail:
            msg = f"{msg}\n{detail}"
        super().__init__(msg)
