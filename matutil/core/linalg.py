"""Dense matrix constructors, reshaping and block-diagonal assembly.

This module provides the dimension validators shared by every entry point,
the constrained constructors (random, constant, scaled identity), the
row/column-major vectorizer and the dense block-diagonal builder. Inputs are
coerced to float64 NumPy arrays; SciPy sparse inputs are densified.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any

import numpy as np

from . import backend as be
from .errors import (
    ElementCountMismatchError,
    InvalidDimensionError,
    InvalidMatrixError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray
else:
    Sequence = tuple  # type: ignore[assignment]
    NDArray = np.ndarray  # type: ignore[misc,assignment]

# Matrix type alias
Matrix = Any

__all__ = [
    "add_value",
    "as_dim",
    "block_diag",
    "check_matrix",
    "coerce",
    "const_dense",
    "equal",
    "equal_approx",
    "rand_dense",
    "scaled_identity",
    "set_values",
    "to_dense",
    "unroll",
    "validate_count",
    "validate_dims",
]

_LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------


def as_dim(dim: str, value: Any) -> int:
    """Return ``value`` as a Python int, rejecting non-integral input.

    Floats (even integral-valued ones) are refused rather than truncated.
    """
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidDimensionError(dim, value) from None


def validate_dims(rows: int, cols: int) -> tuple[int, int]:
    """Raise InvalidDimensionError unless both dimensions are positive integers.

    Rows are checked before columns so the error names the first offender.
    Returns the validated ``(rows, cols)``.
    """
    r = as_dim("rows", rows)
    if r <= 0:
        raise InvalidDimensionError("rows", r)
    c = as_dim("cols", cols)
    if c <= 0:
        raise InvalidDimensionError("cols", c)
    return r, c


def validate_count(dim: str, count: int) -> int:
    """Single-dimension variant used by prefix reductions (zero is allowed)."""
    n = as_dim(dim, count)
    if n < 0:
        raise InvalidDimensionError(dim, n)
    return n


def to_dense(A: Matrix) -> NDArray[np.float64]:
    """Convert a matrix-like object to a dense float64 numpy array.

    Parameters
    ----------
    A : Matrix
        Input matrix which may be a numpy array, a nested sequence, a
        ``SymDense`` or a SciPy sparse matrix.

    Returns
    -------
    ndarray
        Dense float64 numpy array.

    """
    return be.asarray(A)


def coerce(m: Matrix) -> NDArray[np.float64]:
    """Return ``m`` as a float64 array of any rank or raise InvalidMatrixError."""
    if m is None:
        raise InvalidMatrixError(None)
    try:
        return to_dense(m)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrixError(f"not convertible to float array ({exc})") from exc


def check_matrix(m: Matrix) -> NDArray[np.float64]:
    """Return ``m`` as a 2-D float64 array or raise InvalidMatrixError."""
    A = coerce(m)
    if A.ndim != 2:
        raise InvalidMatrixError(f"expected 2-D array, got ndim={A.ndim}")
    return A


def _check_inplace(m: Matrix) -> NDArray[np.float64]:
    # in-place updates must write through to the caller's buffer
    if m is None:
        raise InvalidMatrixError(None)
    if not isinstance(m, np.ndarray) or m.ndim != 2:
        raise InvalidMatrixError("in-place update requires a 2-D numpy array")
    if not np.issubdtype(m.dtype, np.floating):
        raise InvalidMatrixError(f"in-place update requires a float array, got {m.dtype}")
    return m


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def rand_dense(  # noqa: PLR0913
    rows: int,
    cols: int,
    low: float,
    high: float,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> NDArray[np.float64]:
    """Matrix of independent draws, uniform over ``[low, high)``.

    The generator is ``rng`` when given, otherwise one built from ``seed``
    (or ``MATUTIL_SEED``); see :func:`matutil.core.backend.default_rng`.
    """
    rows, cols = validate_dims(rows, cols)
    if not (np.isfinite(low) and np.isfinite(high)) or high < low:
        msg = f"rand_dense requires finite bounds with low <= high; got [{low}, {high})."
        raise ValueError(msg)
    gen = be.default_rng(seed, rng)
    return gen.uniform(float(low), float(high), size=(rows, cols))


def const_dense(rows: int, cols: int, value: float) -> NDArray[np.float64]:
    """Matrix of shape (rows, cols) whose every element equals ``value``."""
    rows, cols = validate_dims(rows, cols)
    return np.full((rows, cols), float(value), dtype=np.float64)


def scaled_identity(n: int, value: float) -> NDArray[np.float64]:
    n, _ = validate_dims(n, n)
    return np.eye(n, dtype=np.float64) * float(value)


def add_value(m: NDArray[np.float64], value: float) -> NDArray[np.float64]:
    """Add ``value`` to every element of ``m`` in place and return ``m``."""
    A = _check_inplace(m)
    validate_dims(*A.shape)
    A += float(value)
    return A


# ---------------------------------------------------------------------
# Vectorizer
# ---------------------------------------------------------------------


def unroll(m: Matrix, by_row: bool) -> NDArray[np.float64]:
    """Flatten ``m`` into a new vector, row by row or column by column."""
    A = check_matrix(m)
    return A.flatten(order="C" if by_row else "F")


def set_values(m: NDArray[np.float64], values: Sequence[float], by_row: bool) -> None:
    """Overwrite every element of ``m`` from ``values``.

    ``values`` is read in the same order :func:`unroll` emits. The matrix is
    left untouched when the element counts differ.
    """
    A = _check_inplace(m)
    vals = np.asarray(values, dtype=np.float64).reshape(-1)
    rows, cols = A.shape
    if vals.shape[0] != rows * cols:
        raise ElementCountMismatchError(int(vals.shape[0]), rows * cols)
    A[...] = vals.reshape((rows, cols), order="C" if by_row else "F")


# ---------------------------------------------------------------------
# Block diagonal
# ---------------------------------------------------------------------


def block_diag(mats: Sequence[Matrix]) -> NDArray[np.float64]:
    """Construct a dense block diagonal matrix from rectangular blocks.

    Blocks with a zero dimension are dropped before assembly. Sizes are summed
    first and the result is allocated once; every block is then copied to its
    diagonal offset. An empty (or all-empty) input yields a (0, 0) array.
    """
    blocks = []
    for k, M in enumerate(mats):
        A = None if M is None else coerce(M)
        if A is None or A.size == 0:
            _LOGGER.debug("block_diag: skipping empty block %d", k)
            continue
        if A.ndim != 2:
            raise InvalidMatrixError(f"expected 2-D array, got ndim={A.ndim}")
        blocks.append(A)
    total_r = sum(B.shape[0] for B in blocks)
    total_c = sum(B.shape[1] for B in blocks)
    out = np.zeros((total_r, total_c), dtype=np.float64)
    r0 = c0 = 0
    for B in blocks:
        r, c = B.shape
        out[r0 : r0 + r, c0 : c0 + c] = B
        r0 += r
        c0 += c
    return out


# ---------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------


def equal(a: Matrix, b: Matrix) -> bool:
    """Exact elementwise equality of two matrices of the same shape."""
    Ad, Bd = to_dense(a), to_dense(b)
    return Ad.shape == Bd.shape and bool(np.array_equal(Ad, Bd))


def equal_approx(a: Matrix, b: Matrix, tol: float) -> bool:
    """Elementwise ``|a - b| <= tol`` for matrices of the same shape."""
    Ad, Bd = to_dense(a), to_dense(b)
    if Ad.shape != Bd.shape:
        return False
    return bool(np.all(np.abs(Ad - Bd) <= float(tol)))
