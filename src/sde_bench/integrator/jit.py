import numpy as np
from numba import njit

from .euler import prepare_run, wiener_path


@njit
def euler_chunk(f, g, t, Y, dW, stratonovich, const_f, const_g):
    lt = t.size
    fy = f(t[0], Y[0])
    gy = g(t[0], Y[0])

    for i in range(lt - 1):
        h = t[i + 1] - t[i]
        yi = Y[i]
        if not const_f:
            fy = f(t[i], yi)
        if not const_g:
            gy = g(t[i], yi)
        dw = dW[i]

        if stratonovich and not const_g:
            ybar = yi + gy * dw
            Y[i + 1, :] = yi + h * fy + 0.5 * (gy + g(t[i], ybar)) * dw
        else:
            Y[i + 1, :] = yi + h * fy + gy * dw

    return Y


def sde_euler_jit(f, g, tspan, y0, options=None):
    # f and g must be numba-compiled: they are called from inside the kernel.
    opts, t, y, dW = prepare_run(f, g, tspan, y0, options)

    Y = np.empty((t.size, y.size), dtype=float)
    Y[0] = y
    Y = euler_chunk(
        f,
        g,
        t,
        Y,
        np.ascontiguousarray(dW),
        opts.sde_type == "Stratonovich",
        bool(opts.const_ffun),
        bool(opts.const_gfun),
    )
    return Y, wiener_path(opts, dW)
