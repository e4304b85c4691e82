import logging

import numpy as np

from ._validation import (
    _validate_convergence_params,
    _validate_data_matrix,
    _validate_precision_matrix,
    _validate_regularizer,
    _validate_step_params,
)
from .ops import empirical_covariance, relative_change, soft_threshold, try_inverse

logger = logging.getLogger(__name__)


def prox_gradient_mapping(
    data,
    theta_start,
    update_w: float = 0.01,
    update_change: float = 0.5,
    regularizer: float = 0.0,
    max_iter: int = 100,
    tol: float = 1e-6,
):
    """
    L1-regularized precision-matrix estimate by proximal-gradient mapping.

    Each iteration takes a gradient step on the Gaussian negative
    log-likelihood, ``theta - update_w * (S - theta^{-1})``, followed by
    element-wise soft-thresholding at ``regularizer``. If the current
    estimate cannot be inverted the step is counted as failed: ``update_w``
    is multiplied by ``update_change`` and the working estimate restarts
    from ``theta_start``. Failed steps are never raised.

    Parameters
    ----------
    data : (N×P) array           observations in rows, N >= 2
    theta_start : (P×P) array    starting estimate
    update_w : float             step size (gamma), > 0
    update_change : float        shrink factor applied to update_w on failure
    regularizer : float          soft-threshold magnitude (lambda), >= 0
    max_iter : int               iteration bound, >= 0
    tol : float                  stop once the relative change drops below tol

    Returns
    -------
    theta_p, info
      theta_p is the last proposed estimate (the P×P identity if no step
      succeeded). It is not guaranteed to be symmetric or positive-definite.
      info includes:
        - converged   (relative change fell below tol)
        - n_iter      (iterations consumed, <= max_iter)
        - n_failures  (failed inversions)
        - update_w    (step size in effect at exit)
    """
    # ----------------------------
    # Input validation
    # ----------------------------
    data = _validate_data_matrix(data)
    P = data.shape[1]
    theta_start = _validate_precision_matrix(theta_start, P, name="theta_start")
    update_w, update_change = _validate_step_params(update_w, update_change)
    regularizer = _validate_regularizer(regularizer)
    max_iter, tol = _validate_convergence_params(max_iter, tol)

    S = empirical_covariance(data)

    theta_p = np.eye(P)
    theta_k = theta_start.copy()

    converged = False
    n_failures = 0
    i = 0

    # ----------------------------
    # Main loop
    # ----------------------------
    while not converged and i < max_iter:
        i += 1

        inv_theta = try_inverse(theta_k)
        if inv_theta is None:
            n_failures += 1
            update_w *= update_change
            theta_k = theta_start.copy()
            logger.debug(
                "iteration %d: singular estimate, shrinking update_w to %.3g", i, update_w
            )
            continue

        theta_p = soft_threshold(theta_k - update_w * (S - inv_theta), regularizer)

        delta_norm = relative_change(theta_k, theta_p)
        theta_k = theta_p
        if delta_norm < tol:
            converged = True

    if converged:
        logger.debug("converged after %d iterations (%d failed)", i, n_failures)
    else:
        logger.debug(
            "stopped at max_iter=%d without reaching tol=%g (%d failed)",
            max_iter,
            tol,
            n_failures,
        )

    info = {
        "converged": converged,
        "n_iter": i,
        "n_failures": n_failures,
        "update_w": update_w,
    }
    return theta_p, info


def estimate_precision(
    data,
    theta_start,
    update_w: float = 0.01,
    update_change: float = 0.5,
    regularizer: float = 0.0,
    max_iter: int = 100,
    tol: float = 1e-6,
) -> np.ndarray:
    """Sparse precision-matrix estimate; see :func:`prox_gradient_mapping`."""
    theta, _ = prox_gradient_mapping(
        data,
        theta_start,
        update_w=update_w,
        update_change=update_change,
        regularizer=regularizer,
        max_iter=max_iter,
        tol=tol,
    )
    return theta
