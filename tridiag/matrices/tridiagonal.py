from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .banded import BandedMatrix
from ..elements import as_bands, diagonal
from ..errors import ArgumentError
from ..linalg.lu import gttrf, gttrs, lu_slogdet
from ..linalg.usmani import det_usmani


class Tridiagonal(BandedMatrix):
    """A general tridiagonal matrix stored as its sub-diagonal, diagonal and
    super-diagonal. The second super-diagonal `du2` is only present on the
    factors produced by a pivoted LU factorization; it is `None` until then.
    Copies, conversions and elementwise maps carry `du2` along when present;
    sums and differences of two matrices do not.

    Entries are written with numpy's assignment rules, except that a value
    whose type cannot be cast to the matrix dtype within its kind, such as a
    float into an integer matrix, is rejected.

    Parameters:
        dl: Sub-diagonal of length `n - 1`.
        d: Diagonal of length `n`.
        du: Super-diagonal of length `n - 1`.
        du2: Second super-diagonal of length `n - 2`, or `None`.

    """
    _band_names = ('dl', 'd', 'du')

    def __init__(
            self,
            dl: Sequence,
            d: Sequence,
            du: Sequence,
            du2: Optional[Sequence]=None
    ):
        bands = (dl, d, du) if du2 is None else (dl, d, du, du2)
        arrays, elements = as_bands(*bands)
        dl, d, du = arrays[:3]
        n = len(d)
        if (len(dl) != n - 1 or len(du) != n - 1) and not (n == 0 and len(dl) == 0 and len(du) == 0):
            raise ArgumentError(
                'cannot construct Tridiagonal from incompatible lengths of subdiagonal, '
                'diagonal and superdiagonal: ({}, {}, {})'.format(len(dl), n, len(du)))
        if du2 is not None and len(arrays[3]) != max(n - 2, 0):
            raise ArgumentError(
                'second superdiagonal has length {} but should have length {}'.format(
                    len(arrays[3]), max(n - 2, 0)))
        self.dl: np.ndarray = dl
        self.d: np.ndarray = d
        self.du: np.ndarray = du
        self.du2: Optional[np.ndarray] = arrays[3] if du2 is not None else None
        self.elements = elements

    @classmethod
    def from_dense(cls, A: np.ndarray) -> 'Tridiagonal':
        """Extracts the first sub-diagonal, the diagonal and the first super-diagonal
        of a dense matrix. Entries outside these bands are ignored.

        """
        A = np.asarray(A)
        if A.ndim not in (2, 4):
            raise ArgumentError('expected a matrix of numbers or of blocks, got shape {}'.format(A.shape))
        return cls(diagonal(A, -1), diagonal(A, 0), diagonal(A, 1))

    @classmethod
    def from_symtridiagonal(cls, S: BandedMatrix) -> 'Tridiagonal':
        """Widens any banded matrix, in particular a symmetric tridiagonal one, into a
        general tridiagonal matrix with its own copy of the bands.

        """
        return cls(*S._tridiagonal_bands())

    @property
    def n(self) -> int:
        return len(self.d)

    @property
    def has_du2(self) -> bool:
        return self.du2 is not None

    def _bands(self) -> Tuple[np.ndarray, ...]:
        return (self.dl, self.d, self.du)

    def _tridiagonal_bands(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return (self.dl, self.d, self.du)

    def _combine(self, other: 'Tridiagonal', op: Callable) -> 'Tridiagonal':
        self._same_shape(other)
        return Tridiagonal(op(self.dl, other.dl), op(self.d, other.d), op(self.du, other.du))

    def _map_bands(self, func: Callable) -> 'Tridiagonal':
        du2 = None if self.du2 is None else func(self.du2)
        return Tridiagonal(func(self.dl), func(self.d), func(self.du), du2)

    def copyto(self, src: 'Tridiagonal') -> 'Tridiagonal':
        """Overwrites the bands of this matrix with those of `src`."""
        self._same_shape(src)
        self.dl[...] = src.dl
        self.d[...] = src.d
        self.du[...] = src.du
        return self

    def __getitem__(self, index):
        i, j = self._checkbounds(index)
        if i == j:
            return self.elements.copy(self.d[i])
        elif i == j + 1:
            return self.elements.copy(self.dl[j])
        elif i + 1 == j:
            return self.elements.copy(self.du[i])
        else:
            return self.elements.zero(self.dtype)

    def __setitem__(self, index, x):
        i, j = self._checkbounds(index)
        if abs(i - j) <= 1:
            self._check_assignable(x)
        if i == j:
            self.d[i] = x
        elif i - j == 1:
            self.dl[j] = x
        elif j - i == 1:
            self.du[i] = x
        elif np.any(x):
            raise ArgumentError(
                'cannot set entry ({}, {}) off the tridiagonal band to a nonzero value ({})'.format(i, j, x))

    def __eq__(self, other):
        if not isinstance(other, Tridiagonal):
            return NotImplemented
        return (np.array_equal(self.dl, other.dl) and np.array_equal(self.d, other.d)
                and np.array_equal(self.du, other.du))

    def diag(self, k: int=0) -> np.ndarray:
        """Extracts the `k`-th diagonal as a newly allocated array.

        Args:
            k: Diagonal offset; positive offsets lie above the main diagonal.

        Returns:
            band: The entries on the diagonal; zeros outside the stored bands.

        """
        if k == 0:
            return self.d.copy()
        self._check_offset(k)
        if k == -1:
            return self.dl.copy()
        elif k == 1:
            return self.du.copy()
        return self.elements.zeros(self.n - abs(k), self.dtype)

    def transpose(self) -> 'Tridiagonal':
        t = self.elements.transpose
        return Tridiagonal(t(self.du), t(self.d), t(self.dl))

    def adjoint(self) -> 'Tridiagonal':
        h = self.elements.adjoint
        return Tridiagonal(h(self.du), h(self.d), h(self.dl))

    def issymmetric(self) -> bool:
        return (self.elements.is_self_symmetric(self.d)
                and np.array_equal(self.du, self.elements.transpose(self.dl)))

    def ishermitian(self) -> bool:
        h = self.elements.adjoint
        return np.array_equal(self.d, h(self.d)) and np.array_equal(self.du, h(self.dl))

    def iszero(self) -> bool:
        return not (np.any(self.dl) or np.any(self.d) or np.any(self.du))

    def isone(self) -> bool:
        ones = self.elements.ones(self.n, self.dtype)
        return not (np.any(self.dl) or np.any(self.du)) and np.array_equal(self.d, ones)

    def isdiag(self) -> bool:
        return not (np.any(self.dl) or np.any(self.du))

    def istriu(self, k: int=0) -> bool:
        if k <= -1:
            return True
        elif k == 0:
            return not np.any(self.dl)
        elif k == 1:
            return not (np.any(self.dl) or np.any(self.d))
        return self.iszero()

    def istril(self, k: int=0) -> bool:
        if k >= 1:
            return True
        elif k == 0:
            return not np.any(self.du)
        elif k == -1:
            return not (np.any(self.du) or np.any(self.d))
        return self.iszero()

    def tril_(self, k: int=0) -> 'Tridiagonal':
        """Zeros the entries above the `k`-th diagonal in place.

        Args:
            k: Diagonal offset in `[-n - 1, n - 1]`.

        Returns:
            self: This matrix, trimmed.

        """
        n = self.n
        if not -n - 1 <= k <= n - 1:
            raise ArgumentError(
                'the requested diagonal, {}, must be at least {} and at most {} in an {}-by-{} matrix'.format(
                    k, -n - 1, n - 1, n, n))
        if k < -1:
            self.dl[...] = 0
        if k < 0:
            self.d[...] = 0
        if k < 1:
            self.du[...] = 0
        return self

    def triu_(self, k: int=0) -> 'Tridiagonal':
        """Zeros the entries below the `k`-th diagonal in place.

        Args:
            k: Diagonal offset in `[-n + 1, n + 1]`.

        Returns:
            self: This matrix, trimmed.

        """
        n = self.n
        if not -n + 1 <= k <= n + 1:
            raise ArgumentError(
                'the requested diagonal, {}, must be at least {} and at most {} in an {}-by-{} matrix'.format(
                    k, -n + 1, n + 1, n, n))
        if k > 1:
            self.du[...] = 0
        if k > 0:
            self.d[...] = 0
        if k > -1:
            self.dl[...] = 0
        return self

    def tril(self, k: int=0) -> 'Tridiagonal':
        return self.copy().tril_(k)

    def triu(self, k: int=0) -> 'Tridiagonal':
        return self.copy().triu_(k)

    def det(self):
        """Determinant by the Usmani recurrence of leading principal minors."""
        self._require_scalar('det')
        return det_usmani(self.dl, self.d, self.du)

    def slogdet(self) -> Tuple[float, float]:
        """Sign and log-absolute-determinant from a pivoted LU factorization."""
        return self.lu(check=False).slogdet()

    def lu(self, check: bool=True) -> 'TridiagonalLU':
        """Computes the LU factorization with partial pivoting. The factors are
        returned as a tridiagonal matrix whose second super-diagonal is
        populated.

        Args:
            check: Whether to raise when the upper triangular factor is singular.

        Returns:
            F: The factorization.

        """
        self._require_scalar('LU factorization')
        dl, d, du, du2, ipiv, info = gttrf(self.dl, self.d, self.du)
        if check and info > 0:
            raise np.linalg.LinAlgError('matrix is singular: zero pivot at position {}'.format(info))
        return TridiagonalLU(Tridiagonal(dl, d, du, du2), ipiv, info)


class TridiagonalLU:
    """LU factorization `P A = L U` of a tridiagonal matrix. The unit lower
    triangular factor is stored as multipliers in `factors.dl`; the upper
    triangular factor occupies `factors.d`, `factors.du` and `factors.du2`.

    Parameters:
        factors: The packed factors.
        ipiv: One-based pivot indices.
        info: Zero on success; otherwise the position of the first zero pivot.

    """
    def __init__(self, factors: Tridiagonal, ipiv: np.ndarray, info: int):
        self.factors = factors
        self.ipiv = ipiv
        self.info = info

    def issuccess(self) -> bool:
        return self.info == 0

    def solve(self, b: np.ndarray) -> np.ndarray:
        if not self.issuccess():
            raise np.linalg.LinAlgError('matrix is singular: zero pivot at position {}'.format(self.info))
        F = self.factors
        return gttrs(F.dl, F.d, F.du, F.du2, self.ipiv, b)

    def det(self):
        swaps = np.count_nonzero(self.ipiv != np.arange(1, len(self.ipiv) + 1))
        return (-1)**swaps*np.prod(self.factors.d)

    def slogdet(self) -> Tuple[float, float]:
        return lu_slogdet(self.factors.d, self.ipiv)
