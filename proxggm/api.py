"""High-level estimator API for proximal-gradient precision estimation."""

from __future__ import annotations

from typing import Any

import numpy as np

from ._validation import _validate_data_matrix
from .metrics import penalized_log_likelihood
from .ops import empirical_covariance
from .prox import prox_gradient_mapping


def _auto_start(S: np.ndarray) -> np.ndarray:
    """Diagonal warm start ``diag(1 / diag(S))`` used when no start is given."""

    return np.diag(1.0 / np.clip(np.diag(S), 1e-12, None))


def _asarray_2d(x: Any) -> np.ndarray:
    """Convert array-like input (including DataFrames) to a 2D array."""

    if hasattr(x, "to_numpy"):
        x = x.to_numpy()
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr[:, None]
    return arr


def _column_names(obj: Any, size: int) -> list[str]:
    if hasattr(obj, "columns"):
        return [str(c) for c in obj.columns]
    return [f"x{i}" for i in range(size)]


class ProxGradientGGM:
    """Scikit-learn style estimator for sparse Gaussian graphical models."""

    def __init__(
        self,
        *,
        regularizer: float = 0.0,
        update_w: float = 0.01,
        update_change: float = 0.5,
        max_iter: int = 100,
        tol: float = 1e-6,
        theta_start: np.ndarray | str | None = "auto",
    ) -> None:
        self.regularizer = regularizer
        self.update_w = update_w
        self.update_change = update_change
        self.max_iter = max_iter
        self.tol = tol
        self.theta_start = theta_start

    # ------------------------------------------------------------------
    # Scikit-learn estimator protocol
    # ------------------------------------------------------------------
    def get_params(self, deep: bool = True) -> dict[str, Any]:  # noqa: D401 - sklearn API
        return {
            "regularizer": self.regularizer,
            "update_w": self.update_w,
            "update_change": self.update_change,
            "max_iter": self.max_iter,
            "tol": self.tol,
            "theta_start": self.theta_start,
        }

    def set_params(self, **params: Any) -> ProxGradientGGM:  # noqa: D401 - sklearn API
        for key, value in params.items():
            if key not in self.get_params():
                raise ValueError(f"Unknown parameter {key!r}")
            setattr(self, key, value)
        return self

    # ------------------------------------------------------------------
    # Fitting / inference
    # ------------------------------------------------------------------
    def _resolve_start(self, data: np.ndarray) -> np.ndarray:
        P = data.shape[1]
        if isinstance(self.theta_start, str):
            if self.theta_start != "auto":
                raise ValueError(
                    f"theta_start must be 'auto', None or a ({P}, {P}) array, "
                    f"got {self.theta_start!r}"
                )
            return _auto_start(empirical_covariance(data))
        if self.theta_start is None:
            return np.eye(P)
        return np.asarray(self.theta_start, dtype=np.float64)

    def fit(self, X: Any, y: Any = None) -> ProxGradientGGM:
        data = _validate_data_matrix(_asarray_2d(X), name="X")
        theta_start = self._resolve_start(data)

        theta, info = prox_gradient_mapping(
            data,
            theta_start,
            update_w=self.update_w,
            update_change=self.update_change,
            regularizer=self.regularizer,
            max_iter=self.max_iter,
            tol=self.tol,
        )

        self.precision_ = theta
        self.info_ = info
        self.converged_ = info["converged"]
        self.n_iter_ = info["n_iter"]
        self.n_failures_ = info["n_failures"]
        self.update_w_ = info["update_w"]
        self.n_obs_, self.n_features_in_ = data.shape
        self.feature_names_ = _column_names(X, data.shape[1])
        self.is_fitted_ = True
        return self

    def _ensure_fitted(self) -> None:
        if not getattr(self, "is_fitted_", False):
            raise RuntimeError("The estimator has not been fitted yet")

    def score(self, X: Any, y: Any = None) -> float:
        """Penalized log-likelihood of ``X`` under the fitted precision (higher is better)."""
        self._ensure_fitted()
        return penalized_log_likelihood(_asarray_2d(X), self.precision_, self.regularizer)

    def precision_as_frame(self):
        self._ensure_fitted()
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pandas is required for precision_as_frame()") from exc

        return pd.DataFrame(
            self.precision_, index=self.feature_names_, columns=self.feature_names_
        )
