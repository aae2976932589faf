from .eigen import Eigen, eigen_tri, eigvals_tri, eigvecs_tri, svdvals_tri
from .lu import gttrf, gttrs
from .sweep import banded_dot, banded_mul
from .tri import banded_form, chol_tri, solve_psd_tri, solve_tri
from .usmani import det_usmani
