from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from .sweep import SweepResult

ORDERS = (0.5, 1.0, 1.5, 2.0)


@dataclass
class OrderFit:
    slope: float
    intercept: float
    r_squared: float


def estimate_order(dt, err) -> OrderFit:
    # Least-squares slope of log10(err) against log10(dt).
    log_dt = np.log10(np.asarray(dt, dtype=float))
    log_err = np.log10(np.asarray(err, dtype=float))
    res = stats.linregress(log_dt, log_err)
    return OrderFit(slope=float(res.slope), intercept=float(res.intercept), r_squared=float(res.rvalue**2))


def nearest_order(slope: float) -> float:
    return min(ORDERS, key=lambda order: abs(order - slope))


def report_timing(result: SweepResult) -> None:
    print(f"Total simulation time: {result.total_time:g} seconds", flush=True)
    print(
        f"Mean of {result.n} simulations/time-step: {result.time_per_step:g} seconds",
        flush=True,
    )


def reference_lines(dt, mean, orders=ORDERS):
    """Endpoints of the reference slopes, all starting at (dt[0], mean[0]).

    Returns ``(xx, yy)`` shaped (len(orders), 2).
    """
    dt = np.asarray(dt, dtype=float)
    z = np.ones((len(orders), 1))
    xx = z * dt[[0, -1]]
    logdt = np.log10(dt[-1] / dt[0])
    yy = mean[0] * np.hstack([z, 10.0 ** (np.asarray(orders)[:, None] * logdt)])
    return xx, yy


def plot_convergence(result: SweepResult, ax=None):
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    dt = result.dt
    mean = result.mean
    xx, yy = reference_lines(dt, mean)
    logdt = np.log10(dt[-1] / dt[0])

    ax.loglog(dt, mean, "b.-", label="mean")
    ax.loglog(dt, mean + result.std, "c", label="mean + std")
    ax.fill_between(dt, mean, mean + result.std, color="c", alpha=0.15)
    for order, x, y in zip(ORDERS, xx, yy, strict=True):
        ax.loglog(x, y, "k", lw=0.8)
        ax.text(x[1] * 10 ** (0.02 * logdt), y[1], f"{order:1.1f}")

    ax.set_xlim(dt[0], dt[-1])
    ax.set_ylim(mean[0], yy[-1, 1])
    ax.set_box_aspect(1)
    ax.grid(True, which="both", alpha=0.3)
    ax.set_title(
        f"SDE_EULER - {result.sde_type} - Convergence Order - {result.n} "
        f"simulations/time-step, A = {result.a:g}, B = {result.b:g}",
        fontsize=9,
    )
    ax.set_xlabel("dt")
    ax.set_ylabel("Average Absolute Error")
    return fig
