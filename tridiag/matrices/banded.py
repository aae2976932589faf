import abc
import numbers
import operator
from typing import Callable, Optional, Tuple

import numpy as np
import scipy.sparse as spsr

from ..elements import Elements
from ..errors import ArgumentError, DimensionMismatch
from ..linalg.sweep import banded_dot, banded_mul
from ..linalg.tri import banded_form, solve_tri


class BandedMatrix(abc.ABC):
    """A square matrix whose nonzero entries are confined to the main diagonal and
    the first sub- and super-diagonals. Only the bands are stored, so memory is
    linear in the order of the matrix. Entries outside the bands read as zero.

    The matrix is fixed in size but its entries are mutable; instances are
    therefore unhashable. Entries are either numbers or square blocks; the
    element kind determines how entries are transposed and symmetrized.

    Parameters:
        elements: The element kind of the stored bands.

    """
    __hash__ = None
    # Defer to the reflected operators when a numpy array is the left operand.
    __array_ufunc__ = None

    elements: Elements
    _band_names: Tuple[str, ...]

    @abc.abstractmethod
    def _bands(self) -> Tuple[np.ndarray, ...]:
        raise NotImplementedError()

    @abc.abstractmethod
    def _tridiagonal_bands(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Sub-diagonal, diagonal and super-diagonal as they appear in the dense
        matrix.

        """
        raise NotImplementedError()

    @abc.abstractmethod
    def diag(self, k: int=0) -> np.ndarray:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def n(self) -> int:
        raise NotImplementedError()

    @property
    def dtype(self) -> np.dtype:
        return self._bands()[0].dtype

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n, self.n)

    def size(self, axis: Optional[int]=None):
        """The dimensions of the matrix. Axes beyond the second have length one.

        Args:
            axis: Zero-based axis whose length is requested; all dimensions are
                returned when omitted.

        Returns:
            size: The length of the axis, or the shape of the matrix.

        """
        if axis is None:
            return self.shape
        if axis < 0:
            raise ArgumentError('dimension must be >= 0, got {}'.format(axis))
        return self.n if axis <= 1 else 1

    def _checkbounds(self, index) -> Tuple[int, int]:
        try:
            i, j = index
        except (TypeError, ValueError):
            raise IndexError(
                '{} is indexed by a pair of integers, got {!r}'.format(type(self).__name__, index)) from None
        i, j = operator.index(i), operator.index(j)
        n = self.n
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError('index ({}, {}) is out of bounds for a {}x{} matrix'.format(i, j, n, n))
        return i, j

    def _check_assignable(self, x):
        value_type = np.asarray(x).dtype
        if not np.can_cast(value_type, self.dtype, casting='same_kind'):
            raise ArgumentError('cannot store a value of type {} in a {} of type {}'.format(
                value_type, type(self).__name__, self.dtype))

    def _require_scalar(self, operation: str):
        if not self.elements.is_scalar:
            raise ArgumentError('{} requires numeric entries, but {} holds blocks of shape {}'.format(
                operation, type(self).__name__, self.elements.shape))

    def _check_offset(self, k: int):
        n = self.n
        if abs(k) > n:
            raise ArgumentError(
                'requested diagonal, {}, must be at least {} and at most {} for an {}-by-{} matrix'.format(
                    k, -n, n, n, n))

    def _map_bands(self, func: Callable):
        return type(self)(*(func(band) for band in self._bands()))

    def to_dense(self) -> np.ndarray:
        """Materializes the matrix. Entries outside the bands are zero. A matrix of
        blocks yields an array of shape `(n, n, p, p)`.

        """
        sub, diag, sup = self._tridiagonal_bands()
        n = self.n
        dense = np.zeros((n, n) + self.elements.shape, dtype=self.dtype)
        idx = np.arange(n)
        dense[idx, idx] = diag
        dense[idx[1:], idx[:-1]] = sub
        dense[idx[:-1], idx[1:]] = sup
        return dense

    def __array__(self, dtype=None, copy=None):
        dense = self.to_dense()
        return dense if dtype is None else dense.astype(dtype)

    def to_banded(self) -> np.ndarray:
        """The bands in the LAPACK general banded layout of shape `(3, n)`."""
        self._require_scalar('banded layout')
        return banded_form(*self._tridiagonal_bands())

    def to_sparse(self):
        """The matrix as a `scipy.sparse` matrix in compressed row format."""
        self._require_scalar('sparse conversion')
        n = self.n
        if n == 0:
            return spsr.csr_matrix((0, 0), dtype=self.dtype)
        sub, diag, sup = self._tridiagonal_bands()
        return spsr.diags([sub, diag, sup], [-1, 0, 1], shape=(n, n), format='csr', dtype=self.dtype)

    def copy(self):
        return self._map_bands(np.copy)

    def conj(self):
        return self._map_bands(np.conj)

    @property
    def real(self):
        return self._map_bands(np.real)

    @property
    def imag(self):
        return self._map_bands(np.imag)

    def astype(self, dtype):
        return self._map_bands(lambda band: band.astype(dtype))

    @property
    def T(self):
        return self.transpose()

    @property
    def H(self):
        return self.adjoint()

    def sum(self, axis: Optional[int]=None):
        """Sums the entries of the matrix in linear time.

        Args:
            axis: `None` for the sum of all entries, 0 for the column sums and 1
                for the row sums.

        Returns:
            total: The requested sum.

        """
        sub, diag, sup = self._tridiagonal_bands()
        if axis is None:
            return diag.sum(axis=0) + sub.sum(axis=0) + sup.sum(axis=0)
        if axis not in (0, 1):
            raise ArgumentError('axis must be None, 0 or 1, got {}'.format(axis))
        res = diag.copy()
        if axis == 0:
            res[:-1] += sub
            res[1:] += sup
        else:
            res[1:] += sub
            res[:-1] += sup
        return res

    def _same_shape(self, other):
        if self.n != other.n:
            raise DimensionMismatch(
                'dimensions must match: a has dims {}, b has dims {}'.format(self.shape, other.shape))
        if self.elements.shape != other.elements.shape:
            raise DimensionMismatch('entries have incompatible shapes {} and {}'.format(
                self.elements.shape, other.elements.shape))

    @abc.abstractmethod
    def _combine(self, other, op: Callable):
        raise NotImplementedError()

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __neg__(self):
        return self._map_bands(operator.neg)

    def __pos__(self):
        return self.copy()

    def __mul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self._map_bands(lambda band: band*other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self._map_bands(lambda band: other*band)

    def __truediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self._map_bands(lambda band: band / other)

    def __matmul__(self, other):
        if isinstance(other, BandedMatrix):
            other = other.to_dense()
        B = np.asarray(other)
        if B.ndim not in (1, 2):
            return NotImplemented
        C = np.zeros(B.shape, dtype=np.result_type(self.dtype, B))
        return mul(C, self, B)

    def __rmatmul__(self, other):
        B = np.asarray(other)
        if B.ndim not in (1, 2):
            return NotImplemented
        return (self.transpose() @ B.T).T

    def solve(self, rhs: Optional[np.ndarray]=None) -> np.ndarray:
        """Solves `A x = rhs` by banded Gaussian elimination with partial pivoting.

        Args:
            rhs: Right-hand side vector or matrix; the identity when omitted.

        Returns:
            x: The solution of the linear system.

        """
        self._require_scalar('solve')
        sub, diag, sup = self._tridiagonal_bands()
        return solve_tri(sub, diag, sup, rhs)

    def __repr__(self):
        fields = ', '.join('{}={!r}'.format(name, band) for name, band in zip(self._band_names, self._bands()))
        return '{}({})'.format(type(self).__name__, fields)


def mul(C: np.ndarray, A: BandedMatrix, B: np.ndarray, alpha=1, beta=0) -> np.ndarray:
    """Computes `C := alpha*A*B + beta*C` for a banded matrix `A` in time linear
    in the number of entries of `B`. When `alpha` is zero the product is
    skipped and `C` is only scaled. An integer `C` cannot receive a floating
    point product; it is rejected rather than truncated.

    Args:
        C: Output vector or matrix, updated in place.
        A: Banded matrix with numeric entries.
        B: Vector or matrix with the same shape as `C`.
        alpha: Scale applied to the product.
        beta: Scale applied to the previous contents of `C`.

    Returns:
        C: The updated output.

    """
    A._require_scalar('multiplication')
    B = np.asarray(B)
    if B.ndim not in (1, 2) or C.ndim != B.ndim:
        raise DimensionMismatch('B and C must both be vectors or both be matrices')
    m = B.shape[0]
    if not m == A.n == C.shape[0]:
        raise DimensionMismatch(
            'A has first dimension {}, B has {}, C has {} but all must match'.format(A.n, m, C.shape[0]))
    if B.shape[1:] != C.shape[1:]:
        raise DimensionMismatch(
            'second dimension of B, {}, does not match second dimension of C, {}'.format(B.shape[1:], C.shape[1:]))
    product_type = np.result_type(A.dtype, B, alpha, beta)
    if not np.can_cast(product_type, C.dtype, casting='same_kind'):
        raise ArgumentError('cannot store a product of type {} in an output of type {}'.format(
            product_type, C.dtype))
    sub, diag, sup = A._tridiagonal_bands()
    return banded_mul(C, sub, diag, sup, B, alpha, beta)

def dot(x: np.ndarray, A: BandedMatrix, y: np.ndarray):
    """Computes the weighted inner product `x^H A y` without forming `A y`.

    Args:
        x: Left vector.
        A: Banded matrix with numeric entries.
        y: Right vector.

    Returns:
        r: The inner product; zero when all operands are empty.

    """
    A._require_scalar('dot')
    x, y = np.asarray(x), np.asarray(y)
    if not len(x) == A.n == len(y):
        raise DimensionMismatch(
            'x has length {}, A has size {}, y has length {} but all must match'.format(len(x), A.shape, len(y)))
    sub, diag, sup = A._tridiagonal_bands()
    return banded_dot(x, sub, diag, sup, y)
