"""Theoretical error bound implied by the estimator parameters.

These numbers describe the guarantee the chosen (epsilon, alpha, beta) buy
for an m-column matrix. They are computed from the parameters alone and say
nothing about how close a particular run actually got.
"""

import logging
import math
import sys

from ..errors import DegenerateVectorError
from ..types import ErrorBound
from .planner import validate_parameters

logger = logging.getLogger(__name__)

_LOG_FLOAT_MAX = math.log(sys.float_info.max)


def estimate_error_bound(config, m):
    """
    Orthogonal distance bound and the probability with which it holds.

        orthogonal_distance_bound = epsilon / (alpha * m**beta)
        probability_bound         = 1 - 2 * alpha * sqrt(2m - 1)

    A probability bound <= 0 is a vacuous guarantee. It is returned unchanged
    (not clamped) so callers can see that alpha is too large for this m.

    Args:
        config: AlgorithmConfig
        m: int - column count of the input matrix

    Returns:
        ErrorBound

    Raises:
        InvalidParameterError: If config or m is out of range
        DegenerateVectorError: If the distance bound is not a finite float
    """
    epsilon, alpha, beta = validate_parameters(config.epsilon, config.alpha, config.beta, m)

    # epsilon / (alpha * m**beta) in log space; m**beta alone overflows for large beta
    log_distance = math.log(epsilon) - math.log(alpha) - beta * math.log(m)
    if log_distance >= _LOG_FLOAT_MAX:
        raise DegenerateVectorError(
            f"Orthogonal distance bound overflows for epsilon={epsilon}, alpha={alpha}, "
            f"beta={beta}, m={m}"
        )
    distance = math.exp(log_distance)
    probability = 1.0 - 2.0 * alpha * math.sqrt(2 * m - 1)

    bound = ErrorBound(orthogonal_distance_bound=distance, probability_bound=probability)
    if bound.is_vacuous:
        logger.warning(
            "Probability bound %.4g is non-positive for alpha=%g, m=%d; the guarantee is vacuous",
            probability, alpha, m,
        )
    return bound
