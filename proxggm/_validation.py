"""Input validation and sanitization helpers for proxggm.

This module provides standardized validation functions so both entry points
reject malformed inputs with the same, actionable messages.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from .exceptions import DimensionMismatchError, NonFiniteInputError


def _as_float_array(x: Any, *, name: str) -> np.ndarray:
    try:
        arr = np.array(x, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} cannot be converted to numeric array: {e}") from e
    return arr


def _validate_data_matrix(data: Any, *, name: str = "data") -> np.ndarray:
    """Validate and copy the N×P sample matrix.

    Parameters
    ----------
    data : array-like
        Observations in rows, variables in columns.
    name : str, optional
        Variable name for error messages.

    Returns
    -------
    np.ndarray
        A private float64 copy of ``data``.

    Raises
    ------
    DimensionMismatchError
        If ``data`` is not 2D or has fewer than 2 rows or no columns.
    NonFiniteInputError
        If ``data`` contains NaN or inf.
    """
    arr = _as_float_array(data, name=name)

    if arr.ndim != 2:
        raise DimensionMismatchError(
            f"{name} must be 2D (N observations × P variables), got {arr.ndim}D "
            f"with shape {arr.shape}. Try {name}.reshape(-1, 1) for a single variable."
        )

    N, P = arr.shape
    if N < 2:
        raise DimensionMismatchError(
            f"{name} must have at least 2 rows for a sample covariance, got {N}."
        )
    if P < 1:
        raise DimensionMismatchError(f"{name} must have at least 1 column, got {P}.")

    if not np.all(np.isfinite(arr)):
        raise NonFiniteInputError(
            f"{name} contains NaN or infinite values. "
            f"Drop or impute incomplete observations before estimation."
        )

    return arr


def _validate_precision_matrix(theta: Any, P: int, *, name: str = "theta") -> np.ndarray:
    """Validate and copy a P×P precision-matrix estimate.

    Raises
    ------
    DimensionMismatchError
        If ``theta`` is not square with side ``P``.
    NonFiniteInputError
        If ``theta`` contains NaN or inf.
    """
    arr = _as_float_array(theta, name=name)

    if arr.shape != (P, P):
        raise DimensionMismatchError(
            f"{name} must have shape ({P}, {P}) to match the {P} data columns, "
            f"got {arr.shape}."
        )

    if not np.all(np.isfinite(arr)):
        raise NonFiniteInputError(f"{name} contains NaN or infinite values.")

    return arr


def _validate_regularizer(regularizer: Any, *, name: str = "regularizer") -> float:
    if not isinstance(regularizer, numbers.Real) or not regularizer >= 0:
        raise ValueError(
            f"{name} must be non-negative, got {regularizer}. "
            f"Try {name}=0.0 for the unpenalized estimate."
        )
    return float(regularizer)


def _validate_step_params(
    update_w: Any,
    update_change: Any,
) -> tuple[float, float]:
    """Validate the step size and its shrink factor.

    ``update_change`` is only required to be a real number; values outside
    (0, 1) are accepted and simply fail to shrink the step.
    """
    if not isinstance(update_w, numbers.Real) or not update_w > 0:
        raise ValueError(
            f"update_w must be positive, got {update_w}. "
            f"Try update_w=0.01 for a conservative step."
        )
    if not isinstance(update_change, numbers.Real) or not np.isfinite(update_change):
        raise ValueError(
            f"update_change must be a finite real number, got {update_change}. "
            f"Try update_change=0.5 to halve the step after a failed inversion."
        )
    return float(update_w), float(update_change)


def _validate_convergence_params(max_iter: Any, tol: Any) -> tuple[int, float]:
    """Validate the iteration bound and the relative-change tolerance.

    Parameters
    ----------
    max_iter : int
        Maximum number of proximal-gradient iterations (0 is allowed).
    tol : float
        Relative-change threshold for early stopping.

    Returns
    -------
    tuple[int, float]
        Validated (max_iter, tol).
    """
    if (
        isinstance(max_iter, bool)
        or not isinstance(max_iter, numbers.Integral)
        or max_iter < 0
    ):
        raise ValueError(
            f"max_iter must be a non-negative integer, got {max_iter}. "
            f"Try max_iter=100 for typical problems."
        )

    if not isinstance(tol, numbers.Real) or not tol >= 0:
        raise ValueError(
            f"tol must be non-negative, got {tol}. "
            f"Try tol=1e-6 for standard convergence."
        )

    return int(max_iter), float(tol)
