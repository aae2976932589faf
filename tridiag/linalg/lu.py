import logging
from typing import Tuple

import numpy as np
import scipy.linalg as spla

from ..errors import DimensionMismatch


_LOG: logging.Logger = logging.getLogger(__name__)


def lapack_dtype(*arrays) -> np.dtype:
    """Smallest floating point type LAPACK can operate on that represents the
    entries of all arrays.

    """
    return np.result_type(np.float32, *arrays)

def gttrf(
        dl: np.ndarray,
        d: np.ndarray,
        du: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray, int]:
    """Computes the LU factorization of a tridiagonal matrix with partial pivoting
    by row interchanges. Pivoting introduces fill-in on the second
    super-diagonal of the upper triangular factor, which is returned
    separately.

    Args:
        dl: Sub-diagonal band.
        d: Diagonal band.
        du: Super-diagonal band.

    Returns:
        dl: Multipliers defining the unit lower triangular factor.
        d: Diagonal of the upper triangular factor.
        du: First super-diagonal of the upper triangular factor.
        du2: Second super-diagonal of the upper triangular factor.
        ipiv: One-based pivot indices; row `i` was interchanged with row
            `ipiv[i]`.
        info: Zero on success, otherwise the one-based index of the first zero
            pivot of the upper triangular factor.

    """
    dtype = lapack_dtype(dl, d, du)
    dl, d, du = (np.array(band, dtype=dtype) for band in (dl, d, du))
    n = len(d)
    if n < 2:
        ipiv = np.arange(1, n + 1, dtype=np.int32)
        info = 1 if n == 1 and d[0] == 0 else 0
        du2 = np.zeros(0, dtype=dtype)
    else:
        fn, = spla.get_lapack_funcs(('gttrf', ), (dl, d, du))
        dl, d, du, du2, ipiv, info = fn(dl, d, du)
        du2 = du2[:n - 2]
        if info < 0:
            raise ValueError('illegal value in argument {} of gttrf'.format(-info))
    if info > 0:
        _LOG.debug('zero pivot at position %d of a %d x %d tridiagonal LU factorization', info, n, n)
    return dl, d, du, du2, ipiv, info

def gttrs(
        dl: np.ndarray,
        d: np.ndarray,
        du: np.ndarray,
        du2: np.ndarray,
        ipiv: np.ndarray,
        b: np.ndarray
) -> np.ndarray:
    """Solves a linear system with a tridiagonal matrix given the factors computed
    by `gttrf`.

    Args:
        dl: Multipliers of the lower triangular factor.
        d: Diagonal of the upper triangular factor.
        du: First super-diagonal of the upper triangular factor.
        du2: Second super-diagonal of the upper triangular factor.
        ipiv: Pivot indices.
        b: Right-hand side vector or matrix.

    Returns:
        x: The solution with the same shape as `b`.

    """
    b = np.asarray(b)
    n = len(d)
    if b.ndim not in (1, 2) or b.shape[0] != n:
        raise DimensionMismatch(
            'right-hand side has shape {} but the matrix has {} rows'.format(b.shape, n))
    dtype = lapack_dtype(d, b)
    if n == 0:
        return np.zeros(b.shape, dtype=dtype)
    rhs = np.array(b.reshape(n, -1), dtype=dtype)
    if n == 1:
        x = rhs / d[0]
    else:
        fn, = spla.get_lapack_funcs(('gttrs', ), (dl, d, du, du2, rhs))
        x, info = fn(dl, d, du, du2, ipiv, rhs)
        if info < 0:
            raise ValueError('illegal value in argument {} of gttrs'.format(-info))
    return x.reshape(b.shape)

def lu_slogdet(d: np.ndarray, ipiv: np.ndarray) -> Tuple[float, float]:
    """Sign and natural logarithm of the absolute determinant from the diagonal of
    the upper triangular factor and the row interchanges.

    """
    swaps = np.count_nonzero(ipiv != np.arange(1, len(ipiv) + 1))
    sign = -1.0 if swaps % 2 else 1.0
    absd = np.abs(d)
    if np.any(absd == 0):
        return 0.0*sign, -np.inf
    sign = sign*np.prod(d / absd)
    logdet = np.sum(np.log(absd))
    return sign, logdet
