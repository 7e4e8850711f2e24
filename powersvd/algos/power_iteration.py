"""Randomized power iteration for the dominant singular triplet.

Runs power iteration on A A^T starting from a random unit vector for a fixed,
analytically planned number of steps, then recovers the singular value and
right singular vector from the converged left vector:

    u     <- normalize(A (A^T u))       repeated i times
    sigma  = ||A^T u||_2
    v      = A^T u / sigma
"""

import logging

import numpy as np

from ..errors import DegenerateVectorError, InvalidParameterError
from ..types import SingularTriplet
from ._checks import as_matrix, as_vector, is_integer
from .error_bound import estimate_error_bound
from .planner import plan_iterations, validate_seed
from .random_vector import random_unit_vector

logger = logging.getLogger(__name__)


def _normalize(w, what):
    """Return w / ||w||, refusing zero or non-finite norms."""
    w_norm = np.linalg.norm(w)
    if not np.isfinite(w_norm) or w_norm == 0.0:
        raise DegenerateVectorError(f"Cannot normalize {what}: norm = {w_norm}")
    return w / w_norm, w_norm


def power_iterate(A, x0, iterations):
    """
    Apply x <- normalize(A A^T x) a fixed number of times.

    A A^T is never formed; each step costs two matrix-vector products.

    Args:
        A: (n x m) numpy array
        x0: (n,) numpy array - starting unit vector
        iterations: int - number of steps, 0 returns a copy of x0

    Returns:
        x: (n,) numpy array - unit vector after the last step

    Raises:
        InvalidParameterError: If iterations is negative or not an integer
        InvalidDimensionError: If x0 does not match the row count of A
        DegenerateVectorError: If an iterate falls into the null space of A^T
    """
    A = as_matrix(A)
    n, _ = A.shape
    x = as_vector(x0, n, name="starting vector").copy()

    if not is_integer(iterations) or iterations < 0:
        raise InvalidParameterError(
            "iterations", f"iterations must be a non-negative integer, got {iterations!r}"
        )

    for step in range(iterations):
        # Compute A (A^T x) rather than (A A^T) x
        w = A @ (A.T @ x)
        x, _ = _normalize(w, f"iterate at step {step + 1} of {iterations}")

    logger.debug("Ran %d power iterations on %dx%d matrix", iterations, n, A.shape[1])

    return x


def extract_triplet(A, u):
    """
    Recover sigma and v from a converged left singular vector.

    Args:
        A: (n x m) numpy array
        u: (n,) numpy array - unit left singular vector

    Returns:
        SingularTriplet(u, sigma, v) with sigma = ||A^T u|| and v = A^T u / sigma

    Raises:
        DegenerateVectorError: If sigma is zero or non-finite (v undefined)
    """
    A = as_matrix(A)
    n, _ = A.shape
    u = as_vector(u, n, name="left vector")
    if not np.all(np.isfinite(u)):
        raise DegenerateVectorError("Left vector contains non-finite entries")

    v, sigma = _normalize(A.T @ u, "A^T u (singular value is zero)")
    return SingularTriplet.create(u, sigma, v)


def compute_dominant_triplet(A, config, iterations=None):
    """
    Estimate the dominant singular triplet of A.

    Args:
        A: (n x m) numpy array - read, never modified
        config: AlgorithmConfig - epsilon, alpha, beta and starting-vector seed
        iterations: int, optional - use this many steps instead of the planned
            count (parameters are still validated)

    Returns:
        (SingularTriplet, ErrorBound)

    Raises:
        InvalidParameterError: If config or iterations is out of range
        InvalidDimensionError: If A is not a non-empty 2-D array
        DegenerateVectorError: If A^T u vanishes, the error bound overflows,
            or a non-finite value appears
    """
    A = as_matrix(A)
    n, m = A.shape

    planned = plan_iterations(config.epsilon, config.alpha, config.beta, m)
    seed = validate_seed(config.seed)
    bound = estimate_error_bound(config, m)
    if iterations is None:
        iterations = planned

    x0 = random_unit_vector(n, seed=seed)
    u = power_iterate(A, x0, iterations)
    triplet = extract_triplet(A, u)

    logger.debug(
        "Dominant triplet of %dx%d matrix: sigma=%.6g after %d iterations",
        n, m, triplet.singular_value, iterations,
    )
    return triplet, bound
