import numpy as np

from sde_bench.noise import brownian_path
from sde_bench.options import SDEOptions, sde_set


def sde_gbm(mu, sig, tspan, y0, options=None) -> np.ndarray:
    """Closed-form geometric Brownian motion dy = mu*y dt + sig*y dW at the times ``tspan``.

    The Brownian path comes from ``options``: a pinned path in ``RandFUN`` drives the
    solution exactly, otherwise it is sampled like the integrators sample it.
    """
    opts = options if isinstance(options, SDEOptions) else sde_set(options)

    t = np.asarray(tspan, dtype=float).reshape(-1)
    if t.size < 2:
        raise ValueError("tspan must contain at least two time points.")
    if not np.all(np.isfinite(t)) or np.any(np.diff(t) <= 0):
        raise ValueError("tspan must be finite and strictly increasing.")

    y = np.asarray(y0, dtype=float).reshape(-1)
    n = y.size
    mu = np.broadcast_to(np.asarray(mu, dtype=float), (n,))
    sig = np.broadcast_to(np.asarray(sig, dtype=float), (n,))

    W = brownian_path(opts, t, n)
    dt = (t - t[0])[:, None]
    dW = W - W[0]

    if opts.sde_type == "Ito":
        drift = mu - 0.5 * sig**2
    else:
        drift = mu
    return y * np.exp(drift * dt + sig * dW)
