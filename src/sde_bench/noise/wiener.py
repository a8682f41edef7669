import numpy as np

from sde_bench.options import SDEOptions


def _standard_normals(options: SDEOptions, m: int, n: int) -> np.ndarray:
    rand_fun = options.rand_fun
    if callable(rand_fun):
        r = np.asarray(rand_fun(m, n), dtype=float)
        if r.shape != (m, n):
            raise ValueError(f"RandFUN must return shape {(m, n)}, got {r.shape}")
        return r

    rng = np.random.default_rng(options.rand_seed)
    if options.antithetic:
        half = (n + 1) // 2
        r = rng.standard_normal(size=(m, half))
        return np.concatenate([r, -r], axis=1)[:, :n]
    return rng.standard_normal(size=(m, n))


def _pinned_path(options: SDEOptions, lt: int, n: int) -> np.ndarray:
    W = options.rand_fun
    if W.shape != (lt, n):
        raise ValueError(f"RandFUN path must have shape {(lt, n)}, got {W.shape}")
    return W


def brownian_increments(options: SDEOptions, t, n: int) -> np.ndarray:
    t = np.asarray(t, dtype=float).reshape(-1)
    lt = t.size
    if isinstance(options.rand_fun, np.ndarray):
        return np.diff(_pinned_path(options, lt, n), axis=0)

    h = np.diff(t)
    r = _standard_normals(options, lt - 1, n)
    return np.sqrt(h)[:, None] * r


def brownian_path(options: SDEOptions, t, n: int) -> np.ndarray:
    t = np.asarray(t, dtype=float).reshape(-1)
    lt = t.size
    if isinstance(options.rand_fun, np.ndarray):
        return _pinned_path(options, lt, n)

    W = np.zeros((lt, n), dtype=float)
    W[1:] = np.cumsum(brownian_increments(options, t, n), axis=0)
    return W
