"""Packed symmetric matrices and conversion from dense input.

``SymDense`` keeps the diagonal and upper triangle only, laid out row by row
in a flat float64 buffer of length ``n * (n + 1) // 2``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from matutil.output.format import format_matrix

from . import linalg as la
from .errors import (
    AsymmetryError,
    ElementCountMismatchError,
    InvalidDimensionError,
    NotSquareError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

__all__ = [
    "DEFAULT_SYM_TOL",
    "SymDense",
    "SymmetryTol",
    "block_sym_diag",
    "to_sym_dense",
]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymmetryTol:
    """Absolute/relative tolerance for the numerical symmetry check.

    A pair passes when ``|M[j, i] - M[i, j]| <= atol + rtol * |M[i, j]|``.
    """

    atol: float = 1e-6
    rtol: float = 1e-2

    def __post_init__(self) -> None:
        if not (self.atol >= 0.0 and self.rtol >= 0.0):
            raise ValueError("atol and rtol must be nonnegative")


DEFAULT_SYM_TOL = SymmetryTol()


class SymDense:
    """Square symmetric matrix stored as its packed upper triangle."""

    __slots__ = ("_data", "_n")

    def __init__(self, n: int, data: Any = None):
        n = la.as_dim("rows", n)
        if n < 0:
            raise InvalidDimensionError("rows", n)
        size = n * (n + 1) // 2
        if data is None:
            buf = np.zeros(size, dtype=np.float64)
        else:
            buf = np.array(data, dtype=np.float64).reshape(-1)
            if buf.shape[0] != size:
                raise ElementCountMismatchError(int(buf.shape[0]), size)
        self._n = n
        self._data = buf

    @classmethod
    def from_upper(cls, A: NDArray[np.float64]) -> SymDense:
        """Build from the diagonal and upper triangle of a square array."""
        n = A.shape[0]
        return cls(n, A[np.triu_indices(n)])

    def _index(self, i: int, j: int) -> int:
        n = self._n
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"index ({i}, {j}) out of range for size {n}")
        if i > j:
            i, j = j, i
        return self._row_start(i) + (j - i)

    def _row_start(self, i: int) -> int:
        return i * self._n - i * (i - 1) // 2

    def symmetric(self) -> int:
        """Size ``n`` of the ``n x n`` matrix."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n, self._n)

    def at(self, i: int, j: int) -> float:
        return float(self._data[self._index(i, j)])

    def set_sym(self, i: int, j: int, value: float) -> None:
        """Set both ``(i, j)`` and ``(j, i)``."""
        self._data[self._index(i, j)] = float(value)

    def to_dense(self) -> NDArray[np.float64]:
        n = self._n
        out = np.zeros((n, n), dtype=np.float64)
        iu = np.triu_indices(n)
        out[iu] = self._data
        out[iu[1], iu[0]] = self._data
        return out

    def __array__(self, dtype=None, copy=None):
        out = self.to_dense()
        return out if dtype is None else out.astype(dtype)

    def copy(self) -> SymDense:
        return SymDense(self._n, self._data)

    def grow_square(self, k: int) -> SymDense:
        """Return a new ``(n + k)`` matrix holding these values top-left, zeros elsewhere."""
        k = la.as_dim("rows", k)
        if k < 0:
            raise InvalidDimensionError("rows", k)
        out = SymDense(self._n + k)
        out._copy_block(self, 0)
        return out

    def _copy_block(self, block: SymDense, offset: int) -> None:
        # packed row r of the block lands on the diagonal of row offset + r
        m = block._n
        for r in range(m):
            src = block._row_start(r)
            dst = self._row_start(offset + r)
            self._data[dst : dst + (m - r)] = block._data[src : src + (m - r)]

    def __repr__(self) -> str:
        return f"SymDense(n={self._n})\n{format_matrix(self.to_dense())}"


def to_sym_dense(m: Any, *, tol: SymmetryTol = DEFAULT_SYM_TOL) -> SymDense:
    """Convert a square, numerically symmetric matrix to :class:`SymDense`.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    AsymmetryError
        At the first off-diagonal pair, in row-major order, outside ``tol``.

    """
    if isinstance(m, SymDense):
        return m.copy()
    A = la.check_matrix(m)
    r, c = A.shape
    if r != c:
        raise NotSquareError(r, c)
    # NaN in either entry of a pair fails the comparison
    bad = ~(np.abs(A.T - A) <= (tol.atol + tol.rtol * np.abs(A)))
    np.fill_diagonal(bad, False)
    if bad.any():
        i, j = (int(k) for k in np.argwhere(bad)[0])
        _LOGGER.debug("to_sym_dense: asymmetric pair at (%d, %d)", i, j)
        raise AsymmetryError(i, j, float(A[j, i]), float(A[i, j]), format_matrix(A))
    return SymDense.from_upper(A)


def block_sym_diag(mats: Sequence[Any]) -> SymDense:
    """Assemble symmetric blocks into one symmetric block diagonal matrix.

    Zero-sized inputs are dropped. Non-``SymDense`` inputs go through
    :func:`to_sym_dense` and propagate its errors.
    """
    blocks: list[SymDense] = []
    for k, M in enumerate(mats):
        S = M if isinstance(M, SymDense) else None
        if S is None and M is not None:
            A = la.coerce(M)
            S = to_sym_dense(A) if A.size > 0 else None
        if S is None or S.symmetric() == 0:
            _LOGGER.debug("block_sym_diag: skipping empty block %d", k)
            continue
        blocks.append(S)
    out = SymDense(sum(S.symmetric() for S in blocks))
    offset = 0
    for S in blocks:
        out._copy_block(S, offset)
        offset += S.symmetric()
    return out
