from __future__ import annotations

import numpy as np

# Matrices whose 2-norm condition number exceeds this are treated as singular.
_COND_LIMIT = 1.0 / np.finfo(np.float64).eps


def empirical_covariance(data: np.ndarray) -> np.ndarray:
    """Unbiased (N-1) sample covariance of an N×P matrix, always P×P."""
    return np.atleast_2d(np.cov(data, rowvar=False))


def soft_threshold(theta: np.ndarray, regularizer: float) -> np.ndarray:
    """
    Element-wise proximal map of ``regularizer * ||theta||_1``.

    Entries ``<= -regularizer`` move up by ``regularizer``, entries
    ``>= regularizer`` move down by ``regularizer`` and everything strictly
    in between is set to exactly zero. Diagonal entries are shrunk too.
    NaN entries stay NaN.

    Returns a new array; ``theta`` is left untouched.
    """
    theta = np.asarray(theta, dtype=np.float64)
    out = np.zeros_like(theta)
    lo = theta <= -regularizer
    hi = theta >= regularizer
    out[lo] = theta[lo] + regularizer
    # with regularizer == 0 both masks can hold; either branch leaves x as is
    out[hi] = theta[hi] - regularizer
    out[np.isnan(theta)] = np.nan
    return out


def try_inverse(theta: np.ndarray) -> np.ndarray | None:
    """
    Invert ``theta``, or return ``None`` if it is (numerically) singular.

    A matrix is rejected when LAPACK reports an exact singularity, when its
    condition number exceeds ``1/eps`` or when the computed inverse is not
    finite. Callers are expected to branch on the ``None`` result.
    """
    try:
        with np.errstate(divide="ignore", invalid="ignore"):
            cond = np.linalg.cond(theta)
        if not np.isfinite(cond) or cond > _COND_LIMIT:
            return None
        inv = np.linalg.inv(theta)
    except np.linalg.LinAlgError:
        return None
    if not np.all(np.isfinite(inv)):
        return None
    return inv


def relative_change(theta_k: np.ndarray, theta_p: np.ndarray) -> float:
    """Spectral-norm ratio ``||theta_k - theta_p|| / ||theta_k||``."""
    denom = float(np.linalg.norm(theta_k, 2))
    if denom == 0.0:
        return float("inf")
    return float(np.linalg.norm(theta_k - theta_p, 2)) / denom


def l1_norm(theta: np.ndarray) -> float:
    """Sum of absolute values of all entries."""
    return float(np.abs(theta).sum())
