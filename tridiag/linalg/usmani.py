import numpy as np


def det_usmani(a: np.ndarray, b: np.ndarray, c: np.ndarray, shift=0):
    """Computes the determinant of a tridiagonal matrix from the three-term
    recurrence of its leading principal minors,

        theta_0 = 1,
        theta_1 = b_1 + shift,
        theta_i = (b_i + shift) theta_{i-1} - a_{i-1} c_{i-1} theta_{i-2}.

    The recurrence runs in linear time but does not pivot, so it can lose
    precision for ill-conditioned matrices; use a pivoted factorization when
    accuracy matters more than speed.

    Reference: R. Usmani, "Inversion of a tridiagonal Jacobi matrix", Linear
    Algebra and its Applications 212-213 (1994), pp. 413-414.

    Args:
        a: Sub-diagonal of the tridiagonal matrix.
        b: Diagonal of the tridiagonal matrix.
        c: Super-diagonal of the tridiagonal matrix.
        shift: Scalar added to every diagonal entry.

    Returns:
        theta: The determinant of the shifted matrix. The determinant of an empty
            matrix is one.

    """
    n = len(b)
    theta_a = np.ones((), dtype=np.result_type(b, shift))[()]
    if n == 0:
        return theta_a
    theta_b = b[0] + shift
    for i in range(1, n):
        theta_b, theta_a = (b[i] + shift)*theta_b - a[i-1]*c[i-1]*theta_a, theta_b
    return theta_b
