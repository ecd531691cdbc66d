# matutil/output/__init__.py
"""Diagnostic renderings of matrices."""
from .format import format_matrix, matrix_table

__all__ = ["format_matrix", "matrix_table"]
