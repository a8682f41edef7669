from dataclasses import dataclass, field

import numpy as np

from sde_bench.integrator import get_integrator

from .comparison import aggregate_errors, compare_at_step, linear_coefficients, time_grid
from .inputs import SweepInputs

T0 = 0.0
HORIZON_STEPS = 20


@dataclass
class SweepResult:
    dt: np.ndarray
    mean: np.ndarray
    std: np.ndarray
    n: int
    a: float
    b: float
    sde_type: str
    integrator: str = "euler"
    total_time: float = 0.0
    nsteps: int = 0
    step_times: np.ndarray = field(default_factory=lambda: np.zeros(0))

    @property
    def time_per_step(self) -> float:
        # Per time-step column of the ensemble, not per path.
        return self.total_time / self.nsteps if self.nsteps else 0.0


def run_sweep(inputs: SweepInputs, integrator: str = "euler") -> SweepResult:
    integrate, needs_jit = get_integrator(integrator)
    f, g = linear_coefficients(inputs.a, inputs.b, jit=needs_jit)
    options = inputs.options

    dt = inputs.dt
    tf = T0 + HORIZON_STEPS * dt[-1]
    y0 = np.ones(inputs.n, dtype=float)

    # Warm-up run, outside the timing window.
    integrate(f, g, np.array([T0, T0 + dt[0]]), y0, options)

    mean = np.zeros(dt.size)
    std = np.zeros(dt.size)
    step_times = np.zeros(dt.size)
    total_time = 0.0
    nsteps = 0

    for i, h in enumerate(dt):
        t = time_grid(T0, tf, h)
        nsteps += t.size

        cmp = compare_at_step(integrate, f, g, t, y0, inputs.a, inputs.b, options, tf=tf)
        step_times[i] = cmp.elapsed
        total_time += cmp.elapsed
        mean[i], std[i] = aggregate_errors(cmp.y_exact, cmp.y_num)

    return SweepResult(
        dt=dt.copy(),
        mean=mean,
        std=std,
        n=inputs.n,
        a=inputs.a,
        b=inputs.b,
        sde_type=options.sde_type,
        integrator=integrator,
        total_time=total_time,
        nsteps=nsteps,
        step_times=step_times,
    )
