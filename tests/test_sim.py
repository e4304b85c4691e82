import numpy as np
import pytest

from proxggm import simulate_ggm, sparse_precision


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sparse_precision_is_spd(seed):
    theta = sparse_precision(10, density=0.3, seed=seed)
    assert np.allclose(theta, theta.T)
    assert np.linalg.eigvalsh(theta).min() > 0


def test_zero_density_is_diagonal():
    theta = sparse_precision(6, density=0.0, seed=0)
    np.testing.assert_array_equal(theta, 0.5 * np.eye(6))


def test_exact_simulation_reproduces_covariance():
    precision = sparse_precision(4, density=0.5, seed=3)
    X = simulate_ggm(50, precision, seed=4, exact=True)
    assert X.shape == (50, 4)
    assert np.allclose(np.cov(X, rowvar=False), np.linalg.inv(precision), atol=1e-10)


def test_exact_simulation_needs_more_rows_than_columns():
    with pytest.raises(ValueError, match="N > P"):
        simulate_ggm(3, np.eye(3), exact=True)


def test_simulation_is_seeded():
    precision = np.diag([1.0, 2.0])
    assert np.array_equal(simulate_ggm(20, precision, seed=7), simulate_ggm(20, precision, seed=7))
