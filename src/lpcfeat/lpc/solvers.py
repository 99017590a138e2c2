"""LPC coefficient solvers.

Every solver maps a tapered frame and a pole count to
``(coefficients, errors)``, both of length ``poles``. Coefficients use the
predictor convention ``x_hat[n] = sum_k a[k] * x[n - 1 - k]``; ``errors[m - 1]``
is the prediction-error energy of the order-``m`` predictor.
"""

from __future__ import annotations

from collections.abc import Callable

import librosa
import numpy as np
from scipy.signal import lfilter

LPCSolver = Callable[[np.ndarray, int], tuple[np.ndarray, np.ndarray]]


def autocorrelation(x: np.ndarray, order: int) -> np.ndarray:
    """Autocorrelation r[0..order] of a frame (lags past the frame are zero)."""
    n = len(x)
    r = np.zeros(order + 1)
    for k in range(min(order, n - 1) + 1):
        r[k] = np.dot(x[: n - k], x[k:])
    return r


def solve_levinson(frame: np.ndarray, poles: int) -> tuple[np.ndarray, np.ndarray]:
    """Autocorrelation method solved with the Levinson-Durbin recursion.

    Silent frames divide by a zero error term; the result then holds NaN/inf
    and no exception is raised.
    """
    r = autocorrelation(np.asarray(frame, dtype=np.float64), poles)
    a = np.zeros(poles)
    errors = np.zeros(poles)
    err = r[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        for m in range(1, poles + 1):
            acc = r[m] - np.dot(a[: m - 1], r[m - 1 : 0 : -1])
            k = acc / err  # reflection coefficient
            prev = a[: m - 1].copy()
            a[: m - 1] = prev - k * prev[::-1]
            a[m - 1] = k
            err = (1.0 - k * k) * err
            errors[m - 1] = err
    return a, errors


def solve_burg(frame: np.ndarray, poles: int) -> tuple[np.ndarray, np.ndarray]:
    """Burg's method via `librosa.lpc`.

    Error terms are the residual energies of each order's inverse filter.
    A silent frame yields zero coefficients and zero error terms. Unlike
    Levinson-Durbin, which divides by a zero lag-0 autocorrelation and returns
    NaN there, this solver stays finite, so the non-finite policy never fires.
    """
    y = np.asarray(frame, dtype=np.float64)
    errors = np.zeros(poles)
    A = None
    for m in range(1, poles + 1):
        A = librosa.lpc(y, order=m)
        residual = lfilter(A, [1.0], y)
        errors[m - 1] = np.dot(residual, residual)
    return -A[1:], errors


SOLVERS: dict[str, LPCSolver] = {
    "levinson": solve_levinson,
    "burg": solve_burg,
}

SOLVER_TYPES = frozenset(SOLVERS)


def get_solver(name: str) -> LPCSolver:
    """Return the solver registered under name."""
    try:
        return SOLVERS[name]
    except KeyError:
        raise ValueError(f"Unknown LPC solver: {name}. Use one of: {sorted(SOLVER_TYPES)}") from None
