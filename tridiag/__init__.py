from .errors import ArgumentError, DimensionMismatch
from .matrices import BandedMatrix, SymTridiagonal, Tridiagonal, TridiagonalLU, dot, mul
from .conversion import from_dense, to_dense, to_symtridiagonal, to_tridiagonal
