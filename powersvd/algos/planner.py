"""Parameter validation and iteration count for the power-iteration estimator.

The number of iterations is fixed up front from (epsilon, alpha, beta) and the
column count m:

    i = ceil( ln(m**beta / epsilon) / epsilon )

There is deliberately no convergence test; the probabilistic guarantee holds
for exactly this many iterations.
"""

import logging
import math

from ..errors import InvalidParameterError
from ._checks import as_finite, is_integer

logger = logging.getLogger(__name__)


def validate_parameters(epsilon, alpha, beta, m):
    """Check the estimator parameters and return them as floats.

    Args:
        epsilon: accuracy, must satisfy 0 < epsilon <= 1
        alpha: confidence, must satisfy 0 < alpha <= 1
        beta: column-count exponent, must satisfy beta >= 0.5
        m: int - column count of the input matrix, m >= 1

    Returns:
        (epsilon, alpha, beta) as floats

    Raises:
        InvalidParameterError: naming the first parameter out of range
    """
    epsilon = as_finite("epsilon", epsilon)
    alpha = as_finite("alpha", alpha)
    beta = as_finite("beta", beta)

    # Zero is inside the nominal [0, 1] range but leaves the iteration count
    # (epsilon) or the distance bound (alpha) undefined, so both are rejected.
    if epsilon == 0.0:
        raise InvalidParameterError("epsilon", "epsilon must be positive, got 0 (iteration count undefined)")
    if not 0.0 < epsilon <= 1.0:
        raise InvalidParameterError("epsilon", f"epsilon must be in (0, 1], got {epsilon}")
    if alpha == 0.0:
        raise InvalidParameterError("alpha", "alpha must be positive, got 0 (distance bound undefined)")
    if not 0.0 < alpha <= 1.0:
        raise InvalidParameterError("alpha", f"alpha must be in (0, 1], got {alpha}")
    if beta < 0.5:
        raise InvalidParameterError("beta", f"beta must be at least 0.5, got {beta}")
    if not is_integer(m) or m < 1:
        raise InvalidParameterError("m", f"Column count m must be a positive integer, got {m!r}")

    return epsilon, alpha, beta


def validate_seed(seed):
    """Check that a config seed is None or an integer.

    A ``numpy.random.Generator`` is refused here: it carries state between
    calls, so the same config would stop producing the same result.

    Raises:
        InvalidParameterError: If seed is neither None nor an integer
    """
    if seed is not None and not is_integer(seed):
        raise InvalidParameterError("seed", f"seed must be None or an integer, got {seed!r}")
    return seed


def plan_iterations(epsilon, alpha, beta, m):
    """Number of power iterations for the given parameters.

    Args:
        epsilon, alpha, beta: see :func:`validate_parameters`
        m: int - column count of the input matrix

    Returns:
        iterations: int >= 0

    Raises:
        InvalidParameterError: If any parameter is out of range
    """
    epsilon, alpha, beta = validate_parameters(epsilon, alpha, beta, m)

    # ln(m**beta / epsilon) without forming m**beta
    log_ratio = beta * math.log(m) - math.log(epsilon)
    iterations = max(0, math.ceil(log_ratio / epsilon))

    logger.debug(
        "Planned %d iterations (epsilon=%g, alpha=%g, beta=%g, m=%d)",
        iterations, epsilon, alpha, beta, m,
    )
    return iterations
