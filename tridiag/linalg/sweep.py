import numpy as np


def banded_mul(
        C: np.ndarray,
        dl: np.ndarray,
        d: np.ndarray,
        du: np.ndarray,
        B: np.ndarray,
        alpha=1,
        beta=0
) -> np.ndarray:
    """Computes `C := alpha*A*B + beta*C` where `A` is the tridiagonal matrix with
    sub-diagonal `dl`, diagonal `d` and super-diagonal `du`. A single sweep
    down the rows of `B` keeps a window over the previous, current and next
    rows so that each row of the product is formed from three rows of `B`
    without materializing `A`. All columns of `B` are advanced together.

    Args:
        C: Output array with the same shape as `B`; updated in place.
        dl: Sub-diagonal band.
        d: Diagonal band.
        du: Super-diagonal band.
        B: Vector or matrix multiplied from the right.
        alpha: Scale applied to the product.
        beta: Scale applied to the previous contents of `C`.

    Returns:
        C: The updated output array.

    """
    m = B.shape[0]
    if m == 0:
        return C
    if alpha == 0:
        if beta == 0:
            C[...] = 0
        else:
            C *= beta
        return C

    x_plus = B[0]
    x_zero = np.zeros_like(x_plus)
    sub = 0
    for i in range(m - 1):
        x_minus, x_zero, x_plus = x_zero, x_plus, B[i + 1]
        _update(C, i, sub*x_minus + d[i]*x_zero + du[i]*x_plus, alpha, beta)
        sub = dl[i]
    _update(C, m - 1, sub*x_zero + d[m - 1]*x_plus, alpha, beta)
    return C

def _update(C: np.ndarray, i: int, row: np.ndarray, alpha, beta):
    # A zero beta discards C so that NaN in uninitialized memory does not leak.
    if beta == 0:
        C[i] = alpha*row
    else:
        C[i] = alpha*row + beta*C[i]

def banded_dot(
        x: np.ndarray,
        dl: np.ndarray,
        d: np.ndarray,
        du: np.ndarray,
        y: np.ndarray
):
    """Computes the bilinear form `x^H A y` for the tridiagonal matrix `A` with
    sub-diagonal `dl`, diagonal `d` and super-diagonal `du` using the same
    sliding window as `banded_mul`, so only one pass over `y` is required.

    Args:
        x: Left vector; conjugated.
        dl: Sub-diagonal band.
        d: Diagonal band.
        du: Super-diagonal band.
        y: Right vector.

    Returns:
        r: The value of the bilinear form. For empty vectors this is the zero of
            the promoted scalar type.

    """
    n = len(y)
    r = np.zeros((), dtype=np.result_type(x, d, y))[()]
    if n == 0:
        return r
    y_plus = y[0]
    y_zero = 0
    sub = 0
    for i in range(n - 1):
        y_minus, y_zero, y_plus = y_zero, y_plus, y[i + 1]
        r += np.conj(x[i]) * (sub*y_minus + d[i]*y_zero + du[i]*y_plus)
        sub = dl[i]
    r += np.conj(x[n - 1]) * (sub*y_zero + d[n - 1]*y_plus)
    return r
