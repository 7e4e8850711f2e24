"""Rank-k reconstruction from singular triplets.

Builds the truncated SVD sum

    A_k = sum_{l=1..k} sigma_l * u_l v_l^T

from triplets ordered by descending singular value. The orientation is the
conventional u v^T, giving an (n x m) result for an (n x m) source matrix;
callers working with the transposed convention transpose the result.

Also provides adapters that turn a full factorization into triplets, used to
compare the estimator against an exact SVD.
"""

import numpy as np
from scipy.linalg import svd

from ..errors import DegenerateVectorError, InvalidDimensionError, InvalidRankError
from ..types import SingularTriplet
from ._checks import as_matrix, is_integer


def _validate_rank(k, available):
    if not is_integer(k):
        raise InvalidRankError(k, f"Rank must be an integer, got {k!r}")
    if k < 1:
        raise InvalidRankError(k, f"Rank must be at least 1, got {k}")
    if k > available:
        raise InvalidRankError(
            k, f"Rank must not exceed the number of triplets ({available}), got {k}"
        )


def reconstruct_rank_k(triplets, k):
    """
    Rank-k approximation from an ordered sequence of singular triplets.

    Terms are accumulated in index order (largest singular value first) so
    the rounding of the result is reproducible.

    Args:
        triplets: sequence of SingularTriplet (or (u, sigma, v) tuples),
            sorted by descending singular value
        k: int - number of leading triplets to use, 1 <= k <= len(triplets)

    Returns:
        A_k: (n x m) numpy array

    Raises:
        InvalidRankError: If k is out of range
        InvalidDimensionError: If the triplet vectors have inconsistent shapes
        DegenerateVectorError: If the result contains non-finite values
    """
    triplets = list(triplets)
    _validate_rank(k, len(triplets))

    u0, _, v0 = triplets[0]
    n = np.shape(u0)[0]
    m = np.shape(v0)[0]

    A_k = np.zeros((n, m))
    for l, (u, sigma, v) in enumerate(triplets[:k]):
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        if u.shape != (n,) or v.shape != (m,):
            raise InvalidDimensionError(
                f"Triplet {l} has vectors of shape {u.shape} and {v.shape}, expected ({n},) and ({m},)"
            )
        A_k += float(sigma) * np.outer(u, v)

    if not np.all(np.isfinite(A_k)):
        raise DegenerateVectorError("Rank-k reconstruction contains non-finite values")
    return A_k


def triplets_from_factors(U, S, Vt):
    """
    Split (U, S, Vt) factors into a list of singular triplets.

    Args:
        U: (n x r) numpy array - left singular vectors
        S: (r,) numpy array - singular values, descending
        Vt: (r x m) numpy array - right singular vectors (transposed)

    Returns:
        list of r SingularTriplet
    """
    U = np.asarray(U, dtype=np.float64)
    S = np.asarray(S, dtype=np.float64)
    Vt = np.asarray(Vt, dtype=np.float64)
    r = S.shape[0]
    if U.ndim != 2 or Vt.ndim != 2 or U.shape[1] != r or Vt.shape[0] != r:
        raise InvalidDimensionError(
            f"Incompatible factor shapes U{U.shape}, S{S.shape}, Vt{Vt.shape}"
        )
    return [SingularTriplet.create(U[:, l], S[l], Vt[l, :]) for l in range(r)]


def full_svd_triplets(A, rank=None):
    """
    Leading singular triplets of A from a full (economy) SVD.

    Args:
        A: (n x m) numpy array
        rank: int, optional - keep only the first `rank` triplets

    Returns:
        list of SingularTriplet sorted by descending singular value

    Raises:
        InvalidRankError: If rank is < 1 or exceeds min(n, m)
    """
    A = as_matrix(A)
    U, S, Vt = svd(A, full_matrices=False)

    if rank is not None:
        _validate_rank(rank, S.shape[0])
        U = U[:, :rank]
        S = S[:rank]
        Vt = Vt[:rank, :]

    return triplets_from_factors(U, S, Vt)


def frobenius_error(A, triplets, k):
    """||A - A_k||_F for the rank-k reconstruction from `triplets`."""
    A = as_matrix(A)
    A_k = reconstruct_rank_k(triplets, k)
    if A_k.shape != A.shape:
        raise InvalidDimensionError(
            f"Reconstruction has shape {A_k.shape}, matrix has shape {A.shape}"
        )
    return float(np.linalg.norm(A - A_k, ord="fro"))
