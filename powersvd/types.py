"""Result containers shared by the estimator and the low-rank approximator."""

from typing import NamedTuple

import numpy as np


def _frozen(vector):
    """Return a read-only float64 copy of ``vector``."""
    out = np.array(vector, dtype=np.float64)
    out.setflags(write=False)
    return out


class SingularTriplet(NamedTuple):
    """One (u, sigma, v) component of a singular value decomposition.

    Unpacks like the ``(u, sigma, v)`` tuples used elsewhere in the package:

        u, sigma, v = triplet
    """

    left_vector: np.ndarray
    singular_value: float
    right_vector: np.ndarray

    @classmethod
    def create(cls, left_vector, singular_value, right_vector):
        """Build a triplet holding read-only copies of both vectors."""
        return cls(_frozen(left_vector), float(singular_value), _frozen(right_vector))

    def outer(self):
        """Rank-1 term ``sigma * outer(u, v)`` of shape (n, m)."""
        return self.singular_value * np.outer(self.left_vector, self.right_vector)


class ErrorBound(NamedTuple):
    """Theoretical guarantee implied by an :class:`AlgorithmConfig`.

    Attributes:
        orthogonal_distance_bound: bound on the component of the computed
            left vector orthogonal to the dominant subspace
        probability_bound: probability with which the bound holds; may be
            zero or negative when alpha is too large for the column count
    """

    orthogonal_distance_bound: float
    probability_bound: float

    @property
    def is_vacuous(self) -> bool:
        """True when the guarantee says nothing (probability <= 0)."""
        return self.probability_bound <= 0.0
