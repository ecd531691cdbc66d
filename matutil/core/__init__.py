# matutil/core/__init__.py
"""Core computational modules for matutil."""
from . import backend, errors, linalg, stats, symmetric

__all__ = ["backend", "errors", "linalg", "stats", "symmetric"]
