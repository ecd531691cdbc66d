from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure() -> None:
    """Ensure the repository root is on sys.path.

    Running pytest from inside the package directory would otherwise make
    `matutil` unimportable unless it is installed.
    """

    repo_root = Path(__file__).resolve().parents[2]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def data_3x2():
    return np.array([[1.2, 3.4], [4.5, 6.7], [8.9, 10.0]])
