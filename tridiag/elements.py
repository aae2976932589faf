import abc
from typing import Sequence, Tuple

import numpy as np

from .errors import ArgumentError, DimensionMismatch


class Elements(abc.ABC):
    """The element kind of a band describes how individual entries of the matrix
    behave under transposition and symmetrization. Plain numbers are their own
    transpose; square blocks are transposed and symmetrized over their last two
    axes.

    Parameters:
        shape: The shape of a single entry of the matrix.

    """
    shape: Tuple[int, ...] = ()

    @abc.abstractmethod
    def symmetrize(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError()

    @abc.abstractmethod
    def transpose(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError()

    @abc.abstractmethod
    def is_self_symmetric(self, band: np.ndarray) -> bool:
        raise NotImplementedError()

    @abc.abstractmethod
    def copy(self, x):
        raise NotImplementedError()

    def adjoint(self, x: np.ndarray) -> np.ndarray:
        return np.conj(self.transpose(x))

    def zeros(self, num: int, dtype: np.dtype) -> np.ndarray:
        return np.zeros((num, ) + self.shape, dtype=dtype)

    def zero(self, dtype: np.dtype):
        return np.zeros(self.shape, dtype=dtype)[()]

    @property
    def is_scalar(self) -> bool:
        return self.shape == ()


class ScalarElements(Elements):
    """Entries are plain numbers. Symmetrization and transposition are the identity
    and every diagonal entry is trivially symmetric.

    """
    def symmetrize(self, x: np.ndarray) -> np.ndarray:
        return x

    def transpose(self, x: np.ndarray) -> np.ndarray:
        return x

    def is_self_symmetric(self, band: np.ndarray) -> bool:
        return True

    def copy(self, x):
        return x

    def ones(self, num: int, dtype: np.dtype) -> np.ndarray:
        return np.ones(num, dtype=dtype)


class BlockElements(Elements):
    """Entries are square blocks stored along the trailing two axes of the band.
    The symmetrization of a block keeps its upper triangle and mirrors it into
    the lower triangle.

    Parameters:
        size: The number of rows (and columns) in each block.

    """
    def __init__(self, size: int):
        self.size = size
        self.shape = (size, size)

    def symmetrize(self, x: np.ndarray) -> np.ndarray:
        return np.triu(x) + np.swapaxes(np.triu(x, 1), -1, -2)

    def transpose(self, x: np.ndarray) -> np.ndarray:
        return np.swapaxes(x, -1, -2)

    def is_self_symmetric(self, band: np.ndarray) -> bool:
        return np.array_equal(band, self.transpose(band))

    def copy(self, x):
        return np.array(x)

    def ones(self, num: int, dtype: np.dtype) -> np.ndarray:
        eye = np.eye(self.size, dtype=dtype)
        return np.broadcast_to(eye, (num, ) + self.shape).copy()


def element_kind(trailing: Tuple[int, ...]) -> Elements:
    """Identify the element kind from the shape of a single entry of a band or of
    a dense matrix.

    Args:
        trailing: The shape of the axes beyond the indexing axes.

    Returns:
        elements: The element kind.

    """
    if trailing == ():
        return ScalarElements()
    if len(trailing) == 2 and trailing[0] == trailing[1]:
        return BlockElements(trailing[0])
    raise ArgumentError(
        'entries must be numbers or square blocks, got entries of shape {}'.format(trailing))

def as_bands(*bands: Sequence) -> Tuple[Tuple[np.ndarray, ...], Elements]:
    """Copy the provided sequences into band arrays with a common dtype and a
    common element kind. Empty sequences adopt the element kind of the others.

    Args:
        bands: Sequences of numbers (one-dimensional) or of square blocks
            (three-dimensional).

    Returns:
        arrays: The bands as freshly allocated arrays.
        elements: The element kind shared by all bands.

    """
    arrays = [np.array(band) for band in bands]
    for a in arrays:
        if a.ndim not in (1, 3):
            raise ArgumentError(
                'bands must be one-dimensional sequences of numbers or of square '
                'blocks, got an array of shape {}'.format(a.shape))
    blocks = [a for a in arrays if a.ndim == 3]
    elements = element_kind(blocks[0].shape[1:]) if blocks else ScalarElements()
    nonempty = [a for a in arrays if a.size > 0]
    dtype = np.result_type(*(nonempty or arrays))
    out = []
    for a in arrays:
        if a.size == 0:
            a = a.reshape((0, ) + elements.shape)
        elif a.shape[1:] != elements.shape:
            raise DimensionMismatch(
                'bands hold entries of incompatible shapes {} and {}'.format(
                    a.shape[1:], elements.shape))
        out.append(a.astype(dtype, copy=False))
    return tuple(out), elements

def diagonal(A: np.ndarray, k: int) -> np.ndarray:
    """Extract the `k`-th diagonal of a dense matrix as a band. For a matrix of
    blocks the leading two axes index the matrix.

    Args:
        A: Dense matrix of shape `(n, n)` or `(n, n, p, p)`.
        k: The diagonal offset; positive offsets lie above the main diagonal.

    Returns:
        band: The entries along the diagonal, leading axis first.

    """
    return np.moveaxis(np.diagonal(A, k, 0, 1), -1, 0).copy()
