import time
from dataclasses import dataclass

import numpy as np
from numba import njit

from sde_bench.analytic import sde_gbm
from sde_bench.options import sde_set


@dataclass
class ComparisonResult:
    y_exact: np.ndarray
    y_num: np.ndarray
    elapsed: float


def time_grid(t0: float, tf: float, h: float) -> np.ndarray:
    # t0, t0+h, ... <= tf; the tolerance keeps tf when h divides the horizon up to round-off.
    m = int(np.floor((tf - t0) / h * (1.0 + 4.0 * np.finfo(float).eps)))
    return t0 + h * np.arange(m + 1, dtype=float)


def linear_coefficients(a: float, b: float, *, jit: bool = False):
    a = float(a)
    b = float(b)

    def f(t, y):
        return a * y

    def g(t, y):
        return b * y

    if jit:
        return njit(f), njit(g)
    return f, g


def compare_at_step(integrate, f, g, t, y0, a, b, options, tf=None) -> ComparisonResult:
    """Run the integrator on grid ``t`` and the analytic GBM on the same Brownian path.

    Only the integrator call is timed. The analytic solution spans ``[t[0], tf]``
    (``tf`` defaults to ``t[-1]``) with its noise pinned to the integrator's ``W`` at
    the first and last grid points.
    """
    start = time.perf_counter()
    Y, W = integrate(f, g, t, y0, options)
    elapsed = time.perf_counter() - start

    if tf is None:
        tf = t[-1]
    pinned = sde_set(options, RandFUN=W[[0, -1], :])
    Y_exact = sde_gbm(a, b, [t[0], tf], y0, pinned)
    return ComparisonResult(y_exact=Y_exact[-1], y_num=Y[-1], elapsed=elapsed)


def aggregate_errors(y_exact, y_num) -> tuple[float, float]:
    err = np.abs(np.asarray(y_exact, dtype=float) - np.asarray(y_num, dtype=float))
    if err.size > 1:
        std = float(np.std(err, ddof=1))
    else:
        std = 0.0
    return float(np.mean(err)), std
