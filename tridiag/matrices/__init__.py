from .banded import BandedMatrix, dot, mul
from .tridiagonal import Tridiagonal, TridiagonalLU
from .symtridiagonal import SymTridiagonal
