import collections
import logging
from typing import Optional, Tuple

import numpy as np
import scipy.linalg as spla

from ..errors import ArgumentError


_LOG: logging.Logger = logging.getLogger(__name__)

Eigen = collections.namedtuple('Eigen', ['values', 'vectors'])


def _real_bands(d: np.ndarray, e: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    if np.iscomplexobj(d) or np.iscomplexobj(e):
        raise ArgumentError('eigen-decomposition requires a real symmetric tridiagonal matrix')
    dtype = np.result_type(np.float32, d, e)
    return np.asarray(d, dtype=dtype), np.asarray(e, dtype=dtype)

def _selection(n: int, irange: Optional[Tuple[int, int]], interval: Optional[Tuple[float, float]]):
    if irange is not None and interval is not None:
        raise ArgumentError('select eigenvalues either by index range or by interval, not both')
    if irange is not None:
        lo, hi = irange
        if not 0 <= lo <= hi < n:
            raise ArgumentError(
                'index range ({}, {}) must satisfy 0 <= lo <= hi < {}'.format(lo, hi, n))
        return 'i', (lo, hi)
    if interval is not None:
        vl, vu = interval
        if not vl < vu:
            raise ArgumentError('interval ({}, {}] is empty'.format(vl, vu))
        return 'v', (vl, vu)
    return 'a', None

def eigen_tri(
        d: np.ndarray,
        e: np.ndarray,
        irange: Optional[Tuple[int, int]]=None,
        interval: Optional[Tuple[float, float]]=None,
        lapack_driver: str='auto'
) -> Eigen:
    """Computes the eigen-decomposition of a real symmetric tridiagonal matrix.
    Either all eigenpairs are computed, or those whose zero-based indices (in
    ascending order) lie in the inclusive range `irange`, or those whose
    eigenvalues lie in the half-open interval `(vl, vu]`.

    Args:
        d: Diagonal band.
        e: Off-diagonal band of length `len(d) - 1`.
        irange: Inclusive range of eigenvalue indices.
        interval: Half-open interval of eigenvalues.
        lapack_driver: LAPACK routine used by `scipy.linalg.eigh_tridiagonal`.

    Returns:
        eig: The eigenvalues in ascending order and the orthonormal eigenvectors
            stored column-wise.

    """
    d, e = _real_bands(d, e)
    n = len(d)
    select, select_range = _selection(n, irange, interval)
    if n == 0:
        return Eigen(np.zeros(0, dtype=d.dtype), np.zeros((0, 0), dtype=d.dtype))
    _LOG.debug('eigen-decomposition of a %d x %d symmetric tridiagonal matrix (select=%s)', n, n, select)
    values, vectors = spla.eigh_tridiagonal(
        d, e, select=select, select_range=select_range, lapack_driver=lapack_driver)
    return Eigen(values, vectors)

def eigvals_tri(
        d: np.ndarray,
        e: np.ndarray,
        irange: Optional[Tuple[int, int]]=None,
        interval: Optional[Tuple[float, float]]=None,
        lapack_driver: str='auto'
) -> np.ndarray:
    """Computes the eigenvalues of a real symmetric tridiagonal matrix in ascending
    order. The selection arguments are as in `eigen_tri`.

    """
    d, e = _real_bands(d, e)
    n = len(d)
    select, select_range = _selection(n, irange, interval)
    if n == 0:
        return np.zeros(0, dtype=d.dtype)
    _LOG.debug('eigenvalues of a %d x %d symmetric tridiagonal matrix (select=%s)', n, n, select)
    return spla.eigvalsh_tridiagonal(
        d, e, select=select, select_range=select_range, lapack_driver=lapack_driver)

def eigvecs_tri(d: np.ndarray, e: np.ndarray, values: np.ndarray) -> np.ndarray:
    """Computes the eigenvectors of a real symmetric tridiagonal matrix belonging to
    an explicit set of eigenvalues by inverse iteration. The eigenvalues
    should be sorted in ascending order; the matrix is treated as a single
    unreduced block.

    Args:
        d: Diagonal band.
        e: Off-diagonal band of length `len(d) - 1`.
        values: Eigenvalues whose eigenvectors are requested.

    Returns:
        vectors: The eigenvectors stored column-wise, one for each eigenvalue.

    """
    d, e = _real_bands(d, e)
    n = len(d)
    values = np.asarray(values, dtype=d.dtype)
    if n == 0 or len(values) == 0:
        return np.zeros((n, len(values)), dtype=d.dtype)
    iblock = np.ones(n, dtype=np.int32)
    isplit = np.zeros(n, dtype=np.int32)
    isplit[0] = n
    stein, = spla.get_lapack_funcs(('stein', ), (d, e))
    _LOG.debug('inverse iteration for %d eigenvectors of a %d x %d symmetric tridiagonal matrix', len(values), n, n)
    vectors, info = stein(d, e, values, iblock, isplit)
    if info > 0:
        raise np.linalg.LinAlgError('{} eigenvectors failed to converge'.format(info))
    return vectors[:, :len(values)]

def svdvals_tri(d: np.ndarray, e: np.ndarray) -> np.ndarray:
    """Singular values of a real symmetric tridiagonal matrix, which are the
    absolute values of its eigenvalues, in descending order.

    """
    vals = np.abs(eigvals_tri(d, e))
    return np.sort(vals)[::-1]
