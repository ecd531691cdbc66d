"""matutil: numeric utilities for dense and symmetric matrices.

This package provides constrained constructors, prefix row/column
reductions, covariance estimation, symmetric validation, block-diagonal
assembly and matrix/vector reshaping on top of NumPy.
"""
from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    "AsymmetryError",
    "DimensionExceededError",
    "ElementCountMismatchError",
    "InvalidDimensionError",
    "InvalidMatrixError",
    "MatrixError",
    "NotSquareError",
    "Orientation",
    "SymDense",
    "SymmetryError",
    "SymmetryTol",
    "add_value",
    "block_diag",
    "block_sym_diag",
    "cols_max",
    "cols_mean",
    "cols_min",
    "cols_stdev",
    "cols_sum",
    "const_dense",
    "cov",
    "equal",
    "equal_approx",
    "format_matrix",
    "matrix_table",
    "rand_dense",
    "rows_max",
    "rows_mean",
    "rows_min",
    "rows_stdev",
    "rows_sum",
    "scaled_identity",
    "set_values",
    "to_sym_dense",
    "unroll",
    "validate_dims",
]

_ERRORS = "matutil.core.errors"
_LINALG = "matutil.core.linalg"
_STATS = "matutil.core.stats"
_SYM = "matutil.core.symmetric"
_FORMAT = "matutil.output.format"

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AsymmetryError": (_ERRORS, "AsymmetryError"),
    "DimensionExceededError": (_ERRORS, "DimensionExceededError"),
    "ElementCountMismatchError": (_ERRORS, "ElementCountMismatchError"),
    "InvalidDimensionError": (_ERRORS, "InvalidDimensionError"),
    "InvalidMatrixError": (_ERRORS, "InvalidMatrixError"),
    "MatrixError": (_ERRORS, "MatrixError"),
    "NotSquareError": (_ERRORS, "NotSquareError"),
    "SymmetryError": (_ERRORS, "SymmetryError"),
    "add_value": (_LINALG, "add_value"),
    "block_diag": (_LINALG, "block_diag"),
    "const_dense": (_LINALG, "const_dense"),
    "equal": (_LINALG, "equal"),
    "equal_approx": (_LINALG, "equal_approx"),
    "rand_dense": (_LINALG, "rand_dense"),
    "scaled_identity": (_LINALG, "scaled_identity"),
    "set_values": (_LINALG, "set_values"),
    "unroll": (_LINALG, "unroll"),
    "validate_dims": (_LINALG, "validate_dims"),
    "Orientation": (_STATS, "Orientation"),
    "cols_max": (_STATS, "cols_max"),
    "cols_mean": (_STATS, "cols_mean"),
    "cols_min": (_STATS, "cols_min"),
    "cols_stdev": (_STATS, "cols_stdev"),
    "cols_sum": (_STATS, "cols_sum"),
    "cov": (_STATS, "cov"),
    "rows_max": (_STATS, "rows_max"),
    "rows_mean": (_STATS, "rows_mean"),
    "rows_min": (_STATS, "rows_min"),
    "rows_stdev": (_STATS, "rows_stdev"),
    "rows_sum": (_STATS, "rows_sum"),
    "SymDense": (_SYM, "SymDense"),
    "SymmetryTol": (_SYM, "SymmetryTol"),
    "block_sym_diag": (_SYM, "block_sym_diag"),
    "to_sym_dense": (_SYM, "to_sym_dense"),
    "format_matrix": (_FORMAT, "format_matrix"),
    "matrix_table": (_FORMAT, "matrix_table"),
}


def __getattr__(name: str) -> Any:
    """Lazily import public functions and types on first access."""
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module 'matutil' has no attribute '{name}'")


def __dir__() -> list[str]:
    """Ensure dir() exposes lazily imported names."""
    return sorted(set(globals()) | set(__all__))
