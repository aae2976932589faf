from typing import Callable, Optional, Sequence, Tuple

import numpy as np
import scipy.sparse as spsr

from .banded import BandedMatrix
from .tridiagonal import Tridiagonal
from ..elements import as_bands, diagonal, element_kind
from ..errors import ArgumentError, DimensionMismatch
from ..linalg.eigen import Eigen, eigen_tri, eigvals_tri, eigvecs_tri, svdvals_tri
from ..linalg.tri import chol_tri, solve_psd_tri
from ..linalg.usmani import det_usmani


class SymTridiagonal(BandedMatrix):
    """A symmetric tridiagonal matrix stored as its diagonal `dv` and its
    super-diagonal `ev`. The sub-diagonal is never stored: entry `(i + 1, i)`
    is the transpose of `ev[i]`, and diagonal entries read as their
    symmetrization. For numeric entries both operations are the identity.

    The super-diagonal may carry one trailing entry beyond the `n - 1` the
    matrix uses; it is ignored everywhere through the effective view `evview`.
    Diagonal entries may be written; a value that cannot be cast to the matrix
    dtype within its kind, such as a float into an integer matrix, is rejected.

    Parameters:
        dv: Diagonal of length `n`.
        ev: Super-diagonal of length `n - 1` or `n`.

    """
    _band_names = ('dv', 'ev')

    def __init__(self, dv: Sequence, ev: Sequence):
        (dv, ev), elements = as_bands(dv, ev)
        n = len(dv)
        if not n - 1 <= len(ev) <= n:
            raise DimensionMismatch(
                'subdiagonal has wrong length. Has length {}, but should be either {} or {}.'.format(
                    len(ev), n - 1, n))
        self.dv: np.ndarray = dv
        self.ev: np.ndarray = ev
        self.elements = elements

    @classmethod
    def from_dense(cls, A: np.ndarray) -> 'SymTridiagonal':
        """Extracts the diagonal and first super-diagonal of a symmetric matrix. The
        first sub-diagonal must be the transpose of the first super-diagonal and
        every diagonal entry must be symmetric.

        """
        A = np.asarray(A)
        if A.ndim not in (2, 4):
            raise ArgumentError('expected a matrix of numbers or of blocks, got shape {}'.format(A.shape))
        elements = element_kind(A.shape[2:])
        dv, ev = diagonal(A, 0), diagonal(A, 1)
        if not (np.array_equal(ev, elements.transpose(diagonal(A, -1)))
                and elements.is_self_symmetric(dv)):
            raise ArgumentError('matrix is not symmetric; cannot convert to SymTridiagonal')
        return cls(dv, ev)

    @classmethod
    def from_tridiagonal(cls, T: Tridiagonal) -> 'SymTridiagonal':
        """Narrows a general tridiagonal matrix that happens to be symmetric."""
        if not T.issymmetric():
            raise ArgumentError('Tridiagonal is not symmetric, cannot convert to SymTridiagonal')
        return cls(T.d, T.du)

    @property
    def n(self) -> int:
        return len(self.dv)

    def evview(self) -> np.ndarray:
        """The super-diagonal without any trailing entry, of length `n - 1`."""
        return self.ev[:max(self.n - 1, 0)]

    def _bands(self) -> Tuple[np.ndarray, ...]:
        return (self.dv, self.ev)

    def _tridiagonal_bands(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        ev = self.evview()
        return (self.elements.transpose(ev), self.elements.symmetrize(self.dv), ev)

    def _combine(self, other: 'SymTridiagonal', op: Callable) -> 'SymTridiagonal':
        self._same_shape(other)
        return SymTridiagonal(op(self.dv, other.dv), op(self.evview(), other.evview()))

    def copyto(self, src: 'SymTridiagonal') -> 'SymTridiagonal':
        """Overwrites the diagonal and the used part of the super-diagonal of this
        matrix with those of `src`.

        """
        self._same_shape(src)
        ev = src.evview()
        self.dv[...] = src.dv
        self.ev[:len(ev)] = ev
        return self

    def __getitem__(self, index):
        i, j = self._checkbounds(index)
        if i == j:
            return self.elements.symmetrize(self.dv[i])
        elif i == j + 1:
            return self.elements.copy(self.elements.transpose(self.ev[j]))
        elif i + 1 == j:
            return self.elements.copy(self.ev[i])
        else:
            return self.elements.zero(self.dtype)

    def __setitem__(self, index, x):
        i, j = self._checkbounds(index)
        if i != j:
            raise ArgumentError('cannot set off-diagonal entry ({}, {})'.format(i, j))
        self._check_assignable(x)
        self.dv[i] = x

    def __eq__(self, other):
        if isinstance(other, SymTridiagonal):
            return np.array_equal(self.dv, other.dv) and np.array_equal(self.evview(), other.evview())
        if isinstance(other, Tridiagonal):
            return all(np.array_equal(a, b) for a, b in zip(self._tridiagonal_bands(), other._bands()))
        return NotImplemented

    def diag(self, k: int=0) -> np.ndarray:
        """Extracts the `k`-th diagonal as a newly allocated array, whatever the
        offset.

        Args:
            k: Diagonal offset; positive offsets lie above the main diagonal.

        Returns:
            band: The symmetrized diagonal for `k = 0`, the super-diagonal or its
                transpose for `k = 1` or `k = -1`, and zeros otherwise.

        """
        if k == 0:
            return np.array(self.elements.symmetrize(self.dv))
        self._check_offset(k)
        if k == 1:
            return self.evview().copy()
        elif k == -1:
            return np.array(self.elements.transpose(self.evview()))
        return self.elements.zeros(self.n - abs(k), self.dtype)

    def transpose(self) -> 'SymTridiagonal':
        return self.copy()

    def adjoint(self) -> 'SymTridiagonal':
        h = self.elements.adjoint
        return SymTridiagonal(h(self.dv), h(self.ev))

    def issymmetric(self) -> bool:
        return True

    def ishermitian(self) -> bool:
        return not (np.any(np.imag(self.dv)) or np.any(np.imag(self.evview())))

    def iszero(self) -> bool:
        return not (np.any(self.evview()) or np.any(self.dv))

    def isone(self) -> bool:
        ones = self.elements.ones(self.n, self.dtype)
        return not np.any(self.evview()) and np.array_equal(self.dv, ones)

    def isdiag(self) -> bool:
        return not np.any(self.evview())

    def istriu(self, k: int=0) -> bool:
        if k <= -1:
            return True
        elif k == 0:
            return self.isdiag()
        return self.iszero()

    def istril(self, k: int=0) -> bool:
        return self.istriu(-k)

    def tril(self, k: int=0) -> Tridiagonal:
        """The lower triangle on and below the `k`-th diagonal. Zeroing one side of
        the band breaks symmetry, so the result is a general tridiagonal matrix
        with its own copy of the bands; this matrix is left unchanged.

        Args:
            k: Diagonal offset in `[-n - 1, n - 1]`.

        Returns:
            T: The trimmed matrix.

        """
        return Tridiagonal.from_symtridiagonal(self).tril_(k)

    def triu(self, k: int=0) -> Tridiagonal:
        """The upper triangle on and above the `k`-th diagonal, widened to a general
        tridiagonal matrix as in `tril`.

        Args:
            k: Diagonal offset in `[-n + 1, n + 1]`.

        Returns:
            T: The trimmed matrix.

        """
        return Tridiagonal.from_symtridiagonal(self).triu_(k)

    def det(self, shift=0):
        """Determinant by the Usmani recurrence, optionally of the matrix with `shift`
        added to every diagonal entry.

        """
        self._require_scalar('det')
        ev = self.evview()
        return det_usmani(ev, self.dv, ev, shift)

    def slogdet(self, shift=0) -> Tuple[float, float]:
        """Sign and log-absolute-determinant of the shifted matrix from a pivoted LU
        factorization, which avoids the overflow of the plain recurrence.

        """
        self._require_scalar('slogdet')
        ev = self.evview()
        return Tridiagonal(ev, self.dv + shift, ev).slogdet()

    def cholesky(self) -> spsr.spmatrix:
        """Lower bidiagonal Cholesky factor `C` with `A = C C^T` of a positive
        definite matrix.

        """
        self._require_hermitian('cholesky')
        return chol_tri(self.dv, self.evview())

    def solve_psd(self, rhs: Optional[np.ndarray]=None) -> Tuple[np.ndarray, spsr.spmatrix]:
        """Solves `A x = rhs` for a positive definite matrix by its Cholesky factor.

        Args:
            rhs: Right-hand side; the identity when omitted.

        Returns:
            x: The solution of the linear system.
            C: The lower bidiagonal Cholesky factor.

        """
        self._require_hermitian('solve_psd')
        return solve_psd_tri(self.dv, self.evview(), rhs)

    def _require_hermitian(self, operation: str):
        self._require_scalar(operation)
        if not self.ishermitian():
            raise ArgumentError('{} requires a real symmetric matrix'.format(operation))

    def eigen(
            self,
            irange: Optional[Tuple[int, int]]=None,
            interval: Optional[Tuple[float, float]]=None
    ) -> Eigen:
        """Eigen-decomposition of a real symmetric tridiagonal matrix, delegated to
        LAPACK through `scipy.linalg.eigh_tridiagonal`.

        Args:
            irange: Inclusive range of zero-based eigenvalue indices in ascending
                order.
            interval: Half-open interval `(vl, vu]` containing the requested
                eigenvalues.

        Returns:
            eig: Ascending eigenvalues and column-wise orthonormal eigenvectors.

        """
        self._require_scalar('eigen')
        return eigen_tri(self.dv, self.evview(), irange, interval)

    def eigvals(
            self,
            irange: Optional[Tuple[int, int]]=None,
            interval: Optional[Tuple[float, float]]=None
    ) -> np.ndarray:
        self._require_scalar('eigvals')
        return eigvals_tri(self.dv, self.evview(), irange, interval)

    def eigvecs(self, values: Optional[np.ndarray]=None) -> np.ndarray:
        """Eigenvectors stored column-wise; when `values` is given, only those
        belonging to the listed eigenvalues.

        """
        self._require_scalar('eigvecs')
        if values is None:
            return self.eigen().vectors
        return eigvecs_tri(self.dv, self.evview(), values)

    def eigmax(self):
        self._require_nonempty('eigmax')
        return self.eigvals(irange=(self.n - 1, self.n - 1))[0]

    def eigmin(self):
        self._require_nonempty('eigmin')
        return self.eigvals(irange=(0, 0))[0]

    def _require_nonempty(self, operation: str):
        if self.n == 0:
            raise ArgumentError('{} is undefined for an empty matrix'.format(operation))

    def svdvals(self) -> np.ndarray:
        self._require_scalar('svdvals')
        return svdvals_tri(self.dv, self.evview())
