"""Power-iteration singular triplet estimation and low-rank reconstruction.

This package contains the randomized power-iteration estimator for the
dominant singular triplet of a matrix, the iteration planner and error bound
that go with it, and rank-k reconstruction from singular triplets.
"""

from .random_vector import random_unit_vector
from .planner import plan_iterations, validate_parameters, validate_seed
from .power_iteration import power_iterate, extract_triplet, compute_dominant_triplet
from .error_bound import estimate_error_bound
from .lowrank import (
    reconstruct_rank_k,
    triplets_from_factors,
    full_svd_triplets,
    frobenius_error,
)

__all__ = [
    "random_unit_vector",
    "plan_iterations",
    "validate_parameters",
    "validate_seed",
    "power_iterate",
    "extract_triplet",
    "compute_dominant_triplet",
    "estimate_error_bound",
    "reconstruct_rank_k",
    "triplets_from_factors",
    "full_svd_triplets",
    "frobenius_error",
]
