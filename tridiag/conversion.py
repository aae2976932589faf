import numpy as np

from .matrices import BandedMatrix, SymTridiagonal, Tridiagonal


def to_dense(M: BandedMatrix) -> np.ndarray:
    """Materializes a banded matrix with zeros outside the bands."""
    return M.to_dense()

def from_dense(A: np.ndarray, symmetric: bool=False) -> BandedMatrix:
    """Extracts the tridiagonal part of a dense matrix.

    Args:
        A: Dense matrix of numbers or of square blocks.
        symmetric: Whether to produce a symmetric tridiagonal matrix, which
            requires `A` to be symmetric on its tridiagonal part.

    Returns:
        M: The banded matrix.

    """
    if symmetric:
        return SymTridiagonal.from_dense(A)
    return Tridiagonal.from_dense(A)

def to_symtridiagonal(M: BandedMatrix) -> SymTridiagonal:
    """Converts to a symmetric tridiagonal matrix, verifying symmetry when the
    input is a general tridiagonal matrix.

    """
    if isinstance(M, SymTridiagonal):
        return M.copy()
    return SymTridiagonal.from_tridiagonal(M)

def to_tridiagonal(M: BandedMatrix) -> Tridiagonal:
    """Converts to a general tridiagonal matrix. A symmetric matrix is widened with
    its sub-diagonal materialized.

    """
    if isinstance(M, Tridiagonal):
        return M.copy()
    return Tridiagonal.from_symtridiagonal(M)
