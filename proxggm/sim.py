import numpy as np
from scipy import linalg


def sparse_precision(P, density=0.1, seed=0, low=0.2, high=0.6):
    """Random sparse, symmetric, diagonally dominant (hence SPD) precision matrix."""
    rng = np.random.default_rng(seed)
    mask = np.triu(rng.random((P, P)) < density, k=1)
    A = np.zeros((P, P))
    A[mask] = rng.uniform(low, high, mask.sum()) * rng.choice([-1.0, 1.0], mask.sum())
    A = A + A.T
    return A + np.diag(np.abs(A).sum(axis=1) + 0.5)


def simulate_ggm(N, precision, seed=0, exact=False):
    rng = np.random.default_rng(seed)
    precision = np.asarray(precision, dtype=np.float64)
    P = precision.shape[0]
    L = linalg.cholesky(np.linalg.inv(precision), lower=True)
    Z = rng.standard_normal((N, P))
    if exact:
        # whiten so the sample covariance of Z is exactly the identity
        if N <= P:
            raise ValueError(f"exact=True needs N > P, got N={N}, P={P}")
        Z = Z - Z.mean(axis=0)
        Lz = linalg.cholesky(np.atleast_2d(np.cov(Z, rowvar=False)), lower=True)
        Z = linalg.solve_triangular(Lz, Z.T, lower=True).T
    return Z @ L.T
