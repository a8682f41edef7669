import numpy as np

from sde_bench.noise import brownian_increments
from sde_bench.options import SDEOptions, sde_set


def prepare_run(f, g, tspan, y0, options):
    opts = options if isinstance(options, SDEOptions) else sde_set(options)
    if not opts.diagonal_noise:
        raise ValueError("Only diagonal noise is supported (DiagonalNoise='yes').")

    t = np.asarray(tspan, dtype=float).reshape(-1)
    if t.size < 2:
        raise ValueError("tspan must contain at least two time points.")
    if not np.all(np.isfinite(t)) or np.any(np.diff(t) <= 0):
        raise ValueError("tspan must be finite and strictly increasing.")

    y = np.asarray(y0, dtype=float).reshape(-1)
    if y.size == 0:
        raise ValueError("y0 must be non-empty.")

    # One-time validation; keep the time loop fast.
    f0 = np.asarray(f(t[0], y))
    if f0.shape != y.shape:
        raise ValueError("Drift shape mismatch")
    if not np.issubdtype(f0.dtype, np.floating):
        raise TypeError("Drift must return float array")
    g0 = np.asarray(g(t[0], y))
    if g0.shape != y.shape:
        raise ValueError("Diagonal noise expects diffusion with the shape of y")
    if not np.issubdtype(g0.dtype, np.floating):
        raise TypeError("Diffusion must return float array")

    dW = brownian_increments(opts, t, y.size)
    return opts, t, y, dW


def sde_euler(f, g, tspan, y0, options=None):
    """Fixed-step Euler integration of dy = f(t, y) dt + g(t, y) dW.

    Euler-Heun for Stratonovich, Euler-Maruyama for Ito. Returns the path ``Y`` and the
    Brownian path ``W`` it was driven by, both shaped (len(tspan), len(y0)).
    """
    opts, t, y, dW = prepare_run(f, g, tspan, y0, options)
    lt = t.size
    h = np.diff(t)
    stratonovich = opts.sde_type == "Stratonovich"

    Y = np.empty((lt, y.size), dtype=float)
    Y[0] = y
    fy = f(t[0], y) if opts.const_ffun else None
    gy = g(t[0], y) if opts.const_gfun else None

    for i in range(lt - 1):
        yi = Y[i]
        if not opts.const_ffun:
            fy = f(t[i], yi)
        if not opts.const_gfun:
            gy = g(t[i], yi)
        dw = dW[i]

        if stratonovich and not opts.const_gfun:
            ybar = yi + gy * dw
            Y[i + 1] = yi + h[i] * fy + 0.5 * (gy + g(t[i], ybar)) * dw
        else:
            Y[i + 1] = yi + h[i] * fy + gy * dw

    return Y, wiener_path(opts, dW)


def wiener_path(opts: SDEOptions, dW: np.ndarray) -> np.ndarray:
    if isinstance(opts.rand_fun, np.ndarray):
        return opts.rand_fun.copy()
    W = np.zeros((dW.shape[0] + 1, dW.shape[1]), dtype=float)
    W[1:] = np.cumsum(dW, axis=0)
    return W
