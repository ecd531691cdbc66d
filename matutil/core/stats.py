"""Prefix row/column reductions and covariance estimation.

Each reduction summarizes the first ``count`` rows (or columns) of a matrix,
one value per row (column), using every element of that row (column). The
orientation is an :class:`Orientation` member; rows and columns go through
separate code paths.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

import numpy as np

from . import linalg as la
from .errors import DimensionExceededError, InvalidDimensionError
from .symmetric import SymDense, to_sym_dense

if TYPE_CHECKING:
    from numpy.typing import NDArray
else:
    NDArray = np.ndarray  # type: ignore[misc,assignment]

__all__ = [
    "Orientation",
    "cols_max",
    "cols_mean",
    "cols_min",
    "cols_stdev",
    "cols_sum",
    "cov",
    "rows_max",
    "rows_mean",
    "rows_min",
    "rows_stdev",
    "rows_sum",
]

# (block, axis) -> per-slice aggregate
Aggregate = Callable[[NDArray[np.float64], int], NDArray[np.float64]]


class Orientation(str, Enum):
    """Whether rows or columns are the unit being summarized/observed."""

    ROWS = "rows"
    COLS = "cols"

    @classmethod
    def parse(cls, value: Orientation | str) -> Orientation:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"orientation must be one of {{'rows','cols'}}; got {value!r}"
            raise ValueError(msg) from None


# ---------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------


def _sum(X: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    return np.sum(X, axis=axis)


def _max(X: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    return np.max(X, axis=axis)


def _min(X: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    return np.min(X, axis=axis)


def _mean(X: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    return np.sum(X, axis=axis) / float(X.shape[axis])


def _stdev(X: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    # Bessel's correction; a single element has zero spread
    ddof = 1 if X.shape[axis] > 1 else 0
    return np.std(X, axis=axis, ddof=ddof)


# ---------------------------------------------------------------------
# Orientation paths
# ---------------------------------------------------------------------


def _reduce_rows(A: NDArray[np.float64], count: int, fn: Aggregate) -> NDArray[np.float64]:
    rows, cols = A.shape
    if count > rows:
        raise DimensionExceededError("rows", count)
    if count == 0:
        return np.zeros(0, dtype=np.float64)
    if cols == 0:
        raise InvalidDimensionError("cols", cols)
    return np.asarray(fn(A[:count, :], 1), dtype=np.float64).reshape(count)


def _reduce_cols(A: NDArray[np.float64], count: int, fn: Aggregate) -> NDArray[np.float64]:
    rows, cols = A.shape
    if count > cols:
        raise DimensionExceededError("cols", count)
    if count == 0:
        return np.zeros(0, dtype=np.float64)
    if rows == 0:
        raise InvalidDimensionError("rows", rows)
    return np.asarray(fn(A[:, :count], 0), dtype=np.float64).reshape(count)


_PATHS = {
    Orientation.ROWS: _reduce_rows,
    Orientation.COLS: _reduce_cols,
}


def _reduce(orient: Orientation, count: int, m: Any, fn: Aggregate) -> NDArray[np.float64]:
    """Validate ``m`` then ``count``, and apply ``fn`` along ``orient``."""
    A = la.check_matrix(m)
    n = la.validate_count(orient.value, count)
    return _PATHS[orient](A, n, fn)


# ---------------------------------------------------------------------
# Public reductions
# ---------------------------------------------------------------------


def rows_sum(rows: int, m: Any) -> NDArray[np.float64]:
    """Sums of the first ``rows`` rows of ``m``.

    Raises InvalidMatrixError for a missing matrix and DimensionExceededError
    when ``rows`` exceeds the number of rows.
    """
    return _reduce(Orientation.ROWS, rows, m, _sum)


def cols_sum(cols: int, m: Any) -> NDArray[np.float64]:
    """Sums of the first ``cols`` columns of ``m``."""
    return _reduce(Orientation.COLS, cols, m, _sum)


def rows_max(rows: int, m: Any) -> NDArray[np.float64]:
    return _reduce(Orientation.ROWS, rows, m, _max)


def cols_max(cols: int, m: Any) -> NDArray[np.float64]:
    return _reduce(Orientation.COLS, cols, m, _max)


def rows_min(rows: int, m: Any) -> NDArray[np.float64]:
    return _reduce(Orientation.ROWS, rows, m, _min)


def cols_min(cols: int, m: Any) -> NDArray[np.float64]:
    return _reduce(Orientation.COLS, cols, m, _min)


def rows_mean(rows: int, m: Any) -> NDArray[np.float64]:
    """Means (sum / element count) of the first ``rows`` rows."""
    return _reduce(Orientation.ROWS, rows, m, _mean)


def cols_mean(cols: int, m: Any) -> NDArray[np.float64]:
    """Means (sum / element count) of the first ``cols`` columns."""
    return _reduce(Orientation.COLS, cols, m, _mean)


def rows_stdev(rows: int, m: Any) -> NDArray[np.float64]:
    """Sample standard deviations (ddof=1) of the first ``rows`` rows."""
    return _reduce(Orientation.ROWS, rows, m, _stdev)


def cols_stdev(cols: int, m: Any) -> NDArray[np.float64]:
    """Sample standard deviations (ddof=1) of the first ``cols`` columns."""
    return _reduce(Orientation.COLS, cols, m, _stdev)


# ---------------------------------------------------------------------
# Covariance
# ---------------------------------------------------------------------


def cov(m: Any, dim: Orientation | str) -> SymDense:
    """Covariance matrix of ``m`` with observations along ``dim``.

    Definition:
        ROWS: X = m - (column means), N = #rows
        COLS: X = m - (row means),    N = #cols
        C    = X @ X.T / (N - 1)

    The result is returned as :class:`SymDense`; a symmetry failure from
    :func:`to_sym_dense` propagates unchanged.
    """
    orient = Orientation.parse(dim)
    A = la.check_matrix(m)
    rows, cols = A.shape
    if orient is Orientation.ROWS:
        n_obs = rows
        if n_obs < 2:
            raise InvalidDimensionError("rows", n_obs)
        X = A - cols_mean(cols, A)[None, :]
    else:
        n_obs = cols
        if n_obs < 2:
            raise InvalidDimensionError("cols", n_obs)
        X = A - rows_mean(rows, A)[:, None]
    C = (X @ X.T) * (1.0 / (n_obs - 1.0))
    return to_sym_dense(C)
