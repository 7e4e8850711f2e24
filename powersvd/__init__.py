# Randomized power-iteration SVD package

import logging

from .config import AlgorithmConfig
from .types import SingularTriplet, ErrorBound
from .errors import (
    PowerSVDError,
    InvalidDimensionError,
    InvalidParameterError,
    InvalidRankError,
    DegenerateVectorError,
)
from .algos import (
    random_unit_vector,
    plan_iterations,
    power_iterate,
    extract_triplet,
    compute_dominant_triplet,
    estimate_error_bound,
    reconstruct_rank_k,
    triplets_from_factors,
    full_svd_triplets,
    frobenius_error,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AlgorithmConfig',
    'SingularTriplet',
    'ErrorBound',
    'PowerSVDError',
    'InvalidDimensionError',
    'InvalidParameterError',
    'InvalidRankError',
    'DegenerateVectorError',
    'random_unit_vector',
    'plan_iterations',
    'power_iterate',
    'extract_triplet',
    'compute_dominant_triplet',
    'estimate_error_bound',
    'reconstruct_rank_k',
    'triplets_from_factors',
    'full_svd_triplets',
    'frobenius_error',
]
