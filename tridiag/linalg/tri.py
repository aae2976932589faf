from typing import Optional, Tuple

import numpy as np
import scipy.linalg as spla
import scipy.sparse as spsr


def banded_form(dl: np.ndarray, d: np.ndarray, du: np.ndarray) -> np.ndarray:
    """Packs the bands of a tridiagonal matrix into the LAPACK general banded
    layout with one sub-diagonal and one super-diagonal, so that
    `ab[1 + i - j, j] = A[i, j]`.

    Args:
        dl: Sub-diagonal band.
        d: Diagonal band.
        du: Super-diagonal band.

    Returns:
        ab: Array of shape `(3, n)` holding the bands.

    """
    n = len(d)
    ab = np.zeros((3, n), dtype=np.result_type(dl, d, du))
    ab[0, 1:] = du
    ab[1] = d
    ab[2, :-1] = dl
    return ab

def symmetric_banded_form(d: np.ndarray, e: np.ndarray) -> np.ndarray:
    """Packs a symmetric tridiagonal matrix into the upper banded layout expected
    by `scipy.linalg.cholesky_banded`.

    """
    n = len(d)
    tri = np.zeros((2, n), dtype=np.result_type(d, e))
    tri[0, 1:] = e
    tri[1] = d
    return tri

def solve_tri(
        dl: np.ndarray,
        d: np.ndarray,
        du: np.ndarray,
        rhs: Optional[np.ndarray]=None
) -> np.ndarray:
    """The special structure of a tridiagonal matrix permits it to be used in
    solving a linear system in linear time instead of the usual cubic time.
    Partial pivoting is used so that no definiteness is required.

    Args:
        dl: Sub-diagonal band.
        d: Diagonal band.
        du: Super-diagonal band.
        rhs: Right-hand side of the linear system. When omitted the identity is
            used, so that the inverse is returned.

    Returns:
        x: The solution of the linear system involving a tridiagonal matrix.

    """
    n = len(d)
    if rhs is None:
        rhs = np.eye(n)
    rhs = np.asarray(rhs)
    if n == 0:
        return np.zeros(rhs.shape, dtype=np.result_type(d, rhs, np.float32))
    x = spla.solve_banded((1, 1), banded_form(dl, d, du), rhs)
    return x

def solve_psd_tri(
        d: np.ndarray,
        e: np.ndarray,
        rhs: Optional[np.ndarray]=None
) -> Tuple[np.ndarray, spsr.spmatrix]:
    """Solve the system `A x = rhs` under the assumption that the symmetric
    tridiagonal matrix `A` is positive definite. The Cholesky factor of a
    tridiagonal matrix is bidiagonal and is computed in linear time.

    Args:
        d: Diagonal band.
        e: Off-diagonal band.
        rhs: Right-hand side of the linear system.

    Returns:
        x: The solution of the linear system involving a tridiagonal matrix.
        C: The lower bidiagonal Cholesky factor, with `A = C C^T`.

    """
    n = len(d)
    if rhs is None:
        rhs = np.eye(n)
    rhs = np.asarray(rhs)
    if n == 0:
        return np.zeros(rhs.shape, dtype=np.result_type(d, rhs, np.float32)), spsr.csr_matrix((0, 0))
    L = spla.cholesky_banded(symmetric_banded_form(d, e))
    x = spla.cho_solve_banded((L, False), rhs)
    C = _lower_factor(L)
    return x, C

def chol_tri(d: np.ndarray, e: np.ndarray) -> spsr.spmatrix:
    """The special structure of a tridiagonal matrix permits its Cholesky factor to
    be computed in linear time instead of cubic time.

    Args:
        d: Diagonal band of a positive definite matrix.
        e: Off-diagonal band of a positive definite matrix.

    Returns:
        C: The lower bidiagonal Cholesky factor of the tridiagonal matrix.

    """
    if len(d) == 0:
        return spsr.csr_matrix((0, 0))
    c = spla.cholesky_banded(symmetric_banded_form(d, e))
    return _lower_factor(c)

def _lower_factor(c: np.ndarray) -> spsr.spmatrix:
    n = c.shape[-1]
    return spsr.diags([c[0, 1:], c[1]], [-1, 0], shape=(n, n))
