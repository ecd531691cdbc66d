"""Array coercion and random source selection.

This module centralizes how inputs become float64 NumPy arrays and how the
random constructors obtain their generator. Reproducibility is opt-in: pass
``seed``/``rng`` explicitly, or set ``MATUTIL_SEED`` in the environment.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

# NumPy is always present
import numpy as np

# SciPy sparse inputs are accepted and densified on entry
import scipy.sparse as _sp

if TYPE_CHECKING:
    from numpy.typing import NDArray


_LOGGER = logging.getLogger(__name__)

SEED_ENV = "MATUTIL_SEED"


def env_seed() -> int | None:
    """Return the integer seed from ``MATUTIL_SEED`` or None when unset/invalid."""
    raw = str(os.environ.get(SEED_ENV, "")).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        _LOGGER.debug("Ignoring non-integer %s=%r", SEED_ENV, raw)
        return None


def default_rng(
    seed: int | None = None, rng: np.random.Generator | None = None,
) -> np.random.Generator:
    """Return the generator a random constructor should draw from.

    Precedence: explicit ``rng``, then ``seed``, then ``MATUTIL_SEED``, then
    fresh OS entropy. A new generator is built on every call so no state is
    shared between callers.
    """
    if rng is not None:
        return rng
    if seed is None:
        seed = env_seed()
        if seed is not None:
            _LOGGER.debug("Seeding generator from %s=%d", SEED_ENV, seed)
    return np.random.default_rng(seed)


def is_sparse(A: Any) -> bool:
    return _sp.issparse(A)


def asarray(x: Any, dtype=np.float64, copy: bool = False) -> NDArray[np.float64]:
    """Convert to a dense NumPy array (default float64)."""
    if is_sparse(x):
        return np.asarray(x.todense(), dtype=dtype)
    if copy:
        return np.array(x, dtype=dtype, copy=True)
    return np.asarray(x, dtype=dtype)

