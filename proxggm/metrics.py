from __future__ import annotations

import numpy as np

from ._validation import (
    _validate_data_matrix,
    _validate_precision_matrix,
    _validate_regularizer,
)
from .exceptions import DimensionMismatchError
from .ops import empirical_covariance, l1_norm


def penalized_negative_log_likelihood(data, theta, regularizer: float) -> float:
    """
    Negated, penalized Gaussian log-likelihood of ``theta`` on ``data``.

    Returns
    -------
    float
        -( N/2 * [ -log|det(theta)| + tr(theta ⊙ S) ]
           + regularizer * sqrt(log(P) / N) * ||theta||_1 / 2 )

        where S is the sample covariance of ``data``, ``⊙`` is the
        element-wise product (so only ``theta_ii * S_ii`` enter the trace)
        and ||.||_1 sums the absolute values of all entries. Callers
        comparing candidate estimates minimize this value. The sign of the
        determinant is not checked, and a singular ``theta`` gives ``-inf``
        instead of raising.
    """
    data = _validate_data_matrix(data)
    N, P = data.shape
    theta = _validate_precision_matrix(theta, P)
    regularizer = _validate_regularizer(regularizer)

    S = empirical_covariance(data)

    tr_TdS = float(np.trace(theta * S))

    # slogdet reports log|det| = -inf for a singular matrix without raising
    _, logdet = np.linalg.slogdet(theta)

    ll = 0.5 * N * (-float(logdet) + tr_TdS)
    ll += regularizer * np.sqrt(np.log(P) / N) * l1_norm(theta) * 0.5
    return -float(ll)


def penalized_log_likelihood(data, theta, regularizer: float) -> float:
    """Negated :func:`penalized_negative_log_likelihood`; higher means a better fit."""
    return -penalized_negative_log_likelihood(data, theta, regularizer)



def support_recovery(theta_hat, theta_true, atol: float = 0.0) -> dict[str, float | int]:
    """
    Edge-level agreement between two precision matrices.

    An off-diagonal pair (i, j), i < j, is an edge when either triangle entry
    has magnitude above ``atol``. Precision and recall are 1.0 by convention
    when their denominators are empty.
    """
    theta_hat = np.asarray(theta_hat, dtype=np.float64)
    theta_true = np.asarray(theta_true, dtype=np.float64)
    if theta_hat.shape != theta_true.shape or theta_hat.ndim != 2:
        raise DimensionMismatchError(
            f"theta_hat {theta_hat.shape} and theta_true {theta_true.shape} "
            f"must be square matrices of the same shape"
        )

    iu = np.triu_indices(theta_hat.shape[0], k=1)
    est = (np.abs(theta_hat[iu]) > atol) | (np.abs(theta_hat.T[iu]) > atol)
    true = (np.abs(theta_true[iu]) > atol) | (np.abs(theta_true.T[iu]) > atol)

    tp = int(np.sum(est & true))
    n_est = int(est.sum())
    n_true = int(true.sum())
    precision = tp / n_est if n_est else 1.0
    recall = tp / n_true if n_true else 1.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {
        "precision": float(precision),
        "recall": float(recall),
        "f1": float(f1),
        "n_edges_est": n_est,
        "n_edges_true": n_true,
    }
