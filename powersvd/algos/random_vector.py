"""Reproducible random starting vectors for power iteration."""

import numpy as np

from ..errors import DegenerateVectorError, InvalidDimensionError
from ._checks import is_integer


def random_unit_vector(n, seed=None):
    """Draw a standard normal vector of length n and scale it to unit norm.

    The draw comes from its own ``numpy.random.Generator``; the global
    ``np.random`` state is never read or reseeded, so runs with different
    seeds are independent of each other.

    Args:
        n: int - vector length
        seed: int, None or numpy.random.Generator - source of randomness.
            The same integer seed always yields the same vector.

    Returns:
        x: (n,) numpy array with ||x||_2 = 1

    Raises:
        InvalidDimensionError: If n is not a positive integer
        DegenerateVectorError: If the draw has zero or non-finite norm
    """
    if not is_integer(n) or n <= 0:
        raise InvalidDimensionError(f"Vector dimension must be a positive integer, got {n!r}")

    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    x = rng.standard_normal(int(n))

    x_norm = np.linalg.norm(x)
    if not np.isfinite(x_norm) or x_norm == 0.0:
        raise DegenerateVectorError(f"Cannot normalize random draw: norm = {x_norm}")
    return x / x_norm
