from .api import ProxGradientGGM
from .exceptions import DimensionMismatchError, NonFiniteInputError
from .metrics import (
    penalized_log_likelihood,
    penalized_negative_log_likelihood,
    support_recovery,
)
from .ops import empirical_covariance, soft_threshold, try_inverse
from .prox import estimate_precision, prox_gradient_mapping
from .sim import simulate_ggm, sparse_precision

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "NonFiniteInputError",
    "ProxGradientGGM",
    "empirical_covariance",
    "estimate_precision",
    "penalized_log_likelihood",
    "penalized_negative_log_likelihood",
    "prox_gradient_mapping",
    "simulate_ggm",
    "soft_threshold",
    "sparse_precision",
    "support_recovery",
    "try_inverse",
]
