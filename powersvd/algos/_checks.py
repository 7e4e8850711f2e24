"""Input checks shared by the algorithm modules."""

import numbers

import numpy as np

from ..errors import InvalidDimensionError, InvalidParameterError


def is_integer(value):
    """True for Python/NumPy integers, excluding bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def as_matrix(A):
    """Coerce ``A`` to a 2-D float64 array without copying when possible.

    Raises:
        InvalidParameterError: If A is complex
        InvalidDimensionError: If A is not 2-D or has an empty dimension
    """
    if np.iscomplexobj(A):
        raise InvalidParameterError("matrix", "Matrix must be real-valued, got complex input")
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2:
        raise InvalidDimensionError(f"Matrix must be 2-D, got {A.ndim}-D input")
    n, m = A.shape
    if n < 1 or m < 1:
        raise InvalidDimensionError(f"Matrix dimensions must be at least 1x1, got {n}x{m}")
    return A


def as_vector(x, length, name="vector"):
    """Coerce ``x`` to a 1-D float64 array of the given length."""
    if np.iscomplexobj(x):
        raise InvalidParameterError(name, f"{name} must be real-valued, got complex input")
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1 or x.shape[0] != length:
        raise InvalidDimensionError(
            f"{name} must have shape ({length},), got {x.shape}"
        )
    return x


def as_finite(name, value):
    """Coerce ``value`` to a finite float, naming ``name`` on failure."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, f"{name} must be a real number, got {value!r}") from None
    if not np.isfinite(value):
        raise InvalidParameterError(name, f"{name} must be finite, got {value}")
    return value
