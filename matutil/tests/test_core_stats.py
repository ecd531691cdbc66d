import numpy as np
import pytest

from matutil.core import stats as st
from matutil.core.errors import (
    AsymmetryError,
    DimensionExceededError,
    InvalidDimensionError,
    InvalidMatrixError,
)
from matutil.core.symmetric import SymDense

# ---------------------------------------------------------------------
# Unit Tests: Reductions
# ---------------------------------------------------------------------

def test_rows_cols_max(data_3x2):
    assert np.array_equal(st.cols_max(2, data_3x2), [8.9, 10.0])
    assert np.array_equal(st.rows_max(3, data_3x2), [3.4, 6.7, 10.0])

def test_rows_cols_min(data_3x2):
    assert np.array_equal(st.cols_min(2, data_3x2), [1.2, 3.4])
    assert np.array_equal(st.rows_min(3, data_3x2), [1.2, 4.5, 8.9])

def test_rows_cols_sum(data_3x2):
    assert np.allclose(st.cols_sum(2, data_3x2), [14.6, 20.1])
    assert np.allclose(st.rows_sum(3, data_3x2), [4.6, 11.2, 18.9])

def test_rows_cols_mean(data_3x2):
    assert np.allclose(st.cols_mean(2, data_3x2), [4.8667, 6.7], atol=0.01)
    assert np.allclose(st.rows_mean(3, data_3x2), [2.3, 5.6, 9.45])

def test_rows_cols_stdev(data_3x2):
    assert np.allclose(st.cols_stdev(2, data_3x2), np.std(data_3x2, axis=0, ddof=1))
    assert np.allclose(st.rows_stdev(3, data_3x2), np.std(data_3x2, axis=1, ddof=1))

def test_stdev_single_element():
    assert np.array_equal(st.rows_stdev(2, np.array([[1.0], [5.0]])), [0.0, 0.0])

def test_prefix_count(data_3x2):
    # only the leading rows/cols are summarized, each over its full extent
    assert np.array_equal(st.rows_max(1, data_3x2), [3.4])
    assert np.array_equal(st.cols_min(1, data_3x2), [1.2])
    assert st.rows_sum(0, data_3x2).shape == (0,)

@pytest.mark.parametrize(
    "fn", [st.rows_sum, st.rows_max, st.rows_min, st.rows_mean, st.rows_stdev],
)
def test_rows_exceeded(fn, data_3x2):
    with pytest.raises(DimensionExceededError, match="row count exceeds matrix rows: 4"):
        fn(4, data_3x2)

@pytest.mark.parametrize(
    "fn", [st.cols_sum, st.cols_max, st.cols_min, st.cols_mean, st.cols_stdev],
)
def test_cols_exceeded(fn, data_3x2):
    with pytest.raises(DimensionExceededError, match="column count exceeds matrix columns: 3"):
        fn(3, data_3x2)

def test_reduction_invalid_matrix():
    # missing matrix is reported before the count is looked at
    with pytest.raises(InvalidMatrixError):
        st.rows_mean(100, None)
    with pytest.raises(InvalidMatrixError):
        st.cols_sum(1, None)

def test_reduction_negative_count(data_3x2):
    with pytest.raises(InvalidDimensionError):
        st.rows_sum(-1, data_3x2)

@pytest.mark.parametrize("fn, count", [(st.rows_sum, 2.5), (st.cols_mean, 1.0), (st.rows_max, 0.0)])
def test_reduction_fractional_count(fn, count, data_3x2):
    with pytest.raises(InvalidDimensionError) as exc:
        fn(count, data_3x2)
    assert exc.value.value == count

def test_reduction_numpy_int_count(data_3x2):
    assert np.allclose(st.rows_sum(np.int64(2), data_3x2), [4.6, 11.2])

def test_orientation_parse():
    assert st.Orientation.parse("ROWS") is st.Orientation.ROWS
    assert st.Orientation.parse(" cols ") is st.Orientation.COLS
    assert st.Orientation.parse(st.Orientation.COLS) is st.Orientation.COLS
    with pytest.raises(ValueError, match="orientation must be one of"):
        st.Orientation.parse("colums")

# ---------------------------------------------------------------------
# Unit Tests: Covariance
# ---------------------------------------------------------------------

def test_cov_scenario():
    m = np.array([[1.0, 2.0], [2.0, 4.0]])
    c_rows = st.cov(m, "rows")
    assert isinstance(c_rows, SymDense)
    assert np.allclose(c_rows.to_dense(), [[1.25, -1.25], [-1.25, 1.25]], atol=1e-3)
    c_cols = st.cov(m, st.Orientation.COLS)
    assert np.allclose(c_cols.to_dense(), [[0.5, 1.0], [1.0, 2.0]], atol=1e-3)

def test_cov_cols_matches_numpy(rng):
    # each row is a variable, each column an observation
    m = rng.standard_normal((3, 20))
    assert np.allclose(st.cov(m, "cols").to_dense(), np.cov(m))

def test_cov_rows_shape(rng):
    m = rng.standard_normal((5, 3))
    c = st.cov(m, "rows")
    assert c.shape == (5, 5)
    X = m - m.mean(axis=0)
    assert np.allclose(c.to_dense(), X @ X.T / 4.0)

def test_cov_errors():
    with pytest.raises(InvalidMatrixError):
        st.cov(None, "rows")
    with pytest.raises(InvalidDimensionError):
        st.cov(np.ones((1, 3)), "rows")
    with pytest.raises(ValueError):
        st.cov(np.ones((2, 2)), "diag")

def test_cov_propagates_symmetry_error(monkeypatch):
    def _fail(C):
        raise AsymmetryError(0, 1, 1.0, 2.0)

    monkeypatch.setattr(st, "to_sym_dense", _fail)
    with pytest.raises(AsymmetryError):
        st.cov(np.array([[1.0, 2.0], [2.0, 4.0]]), "rows")
