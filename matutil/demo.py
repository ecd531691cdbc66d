"""Demonstration of the matutil package.

This module walks through the constructors, prefix reductions, covariance,
symmetric conversion, block-diagonal assembly and the vectorizer.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from .core import linalg as la
from .core import stats as st
from .core import symmetric as sym
from .core.errors import MatrixError
from .output import format_matrix, matrix_table

_LOGGER = logging.getLogger(__name__)


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f" {title}")
    print("=" * 70)


def _run_demo_block(label: str, func: Callable[[], None]) -> None:
    """Execute a demonstration function, logging any input errors."""
    try:
        func()
    except MatrixError as exc:
        _LOGGER.debug("%s demo failed: %s", label, exc)
        print(f"\n[{label} demo failed: {exc}]")


def demo_constructors_and_reductions():
    _banner("1. CONSTRUCTORS AND REDUCTIONS")
    rng = np.random.default_rng(42)
    m = la.rand_dense(4, 3, 0.0, 10.0, rng=rng)
    print(matrix_table(m, floatfmt=".3f"))
    print("\nrows_mean(2):", st.rows_mean(2, m))
    print("cols_stdev(3):", st.cols_stdev(3, m))
    print("\nscaled_identity(3, 2.5):")
    print(format_matrix(la.scaled_identity(3, 2.5)))


def demo_covariance():
    _banner("2. COVARIANCE")
    m = np.array([[1.0, 2.0], [2.0, 4.0]])
    for dim in st.Orientation:
        print(f"\ncov(m, {dim.value!r}):")
        print(format_matrix(st.cov(m, dim)))


def demo_symmetric():
    _banner("3. SYMMETRIC MATRICES AND BLOCK DIAGONALS")
    a = sym.to_sym_dense([[2.0, 1.0], [1.0, 2.0]])
    d = sym.block_sym_diag([a, sym.SymDense(1, [5.0])])
    print(format_matrix(d))
    print("\nAn asymmetric input is rejected:")
    try:
        sym.to_sym_dense([[1.0, 2.0], [3.0, 1.0]])
    except MatrixError as exc:
        print(f"  {exc.__class__.__name__}: {str(exc).splitlines()[0]}")


def demo_vectorizer():
    _banner("4. VECTORIZER")
    m = np.array([[1.2, 3.4], [4.5, 6.7], [8.9, 10.0]])
    print("by row:   ", la.unroll(m, True))
    print("by column:", la.unroll(m, False))
    target = la.const_dense(3, 2, 0.0)
    la.set_values(target, la.unroll(m, False), False)
    print(format_matrix(target))


def run_all_demos() -> None:
    demo_tasks: list[tuple[str, Callable[[], None]]] = [
        ("Constructors", demo_constructors_and_reductions),
        ("Covariance", demo_covariance),
        ("Symmetric", demo_symmetric),
        ("Vectorizer", demo_vectorizer),
    ]
    for label, func in demo_tasks:
        _run_demo_block(label, func)


if __name__ == "__main__":
    run_all_demos()
