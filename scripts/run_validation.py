#!/usr/bin/env python3

import json
from pathlib import Path
from typing import Annotated

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import typer

from sde_bench.options import sde_set
from sde_bench.utils.storage import write_sweep_result
from sde_bench.validation import (
    ValidationParams,
    estimate_order,
    nearest_order,
    plot_convergence,
    report_timing,
    run_validation,
)


app = typer.Typer(add_completion=False)


def _run_single(params: ValidationParams, output_dir: str, run_id: str) -> None:
    dt = params.step_sizes()
    options = sde_set(params.options)

    run_dir = Path(output_dir) / str(run_id)
    run_dir.mkdir(parents=True, exist_ok=True)

    # Persist config immediately so it exists even if the run is interrupted.
    config_used = params.model_dump()
    config_used["dt"] = dt.tolist()
    (run_dir / "config_used.json").write_text(json.dumps(config_used, indent=2))

    print(
        f"{params.integrator} ({options.sde_type}): {dt.size} step sizes, "
        f"{params.n} paths, a={params.a:g}, b={params.b:g}",
        flush=True,
    )
    result = run_validation(
        dt, params.n, params.a, params.b, options, nout=2, integrator=params.integrator
    )

    for h, m, s, elapsed in zip(result.dt, result.mean, result.std, result.step_times, strict=True):
        print(f"  dt={h:.3e}  mean={m:.6e}  std={s:.6e}  time={elapsed:.3f}s", flush=True)
    report_timing(result)

    fit = estimate_order(result.dt, result.mean)
    print(
        f"Empirical order: {fit.slope:.3f} (r^2={fit.r_squared:.3f}), "
        f"nearest {nearest_order(fit.slope):1.1f}",
        flush=True,
    )

    write_sweep_result(run_dir / "convergence.h5", result)
    timings = {
        "total_s": result.total_time,
        "nsteps": int(result.nsteps),
        "per_step_s": result.time_per_step,
        "step_s": result.step_times.tolist(),
    }
    (run_dir / "timings.json").write_text(json.dumps(timings, indent=2))

    fig = plot_convergence(result)
    fig.savefig(run_dir / "convergence.png", dpi=150)
    plt.close(fig)


@app.command()
def main(
    config: Annotated[str | None, typer.Option(help="Path to a JSON validation config.")] = None,
    dt_min: Annotated[float, typer.Option(help="Smallest step size.")] = 1e-3,
    dt_max: Annotated[float, typer.Option(help="Largest step size.")] = 1e-1,
    num_dt: Annotated[int, typer.Option(help="Number of log-spaced step sizes.")] = 3,
    n: Annotated[int, typer.Option(help="Number of paths per step size.")] = 1000,
    a: Annotated[float, typer.Option(help="Drift coefficient.")] = 1.0,
    b: Annotated[float, typer.Option(help="Diffusion coefficient.")] = 1.0,
    sde_type: Annotated[str, typer.Option(help="Stratonovich or Ito.")] = "Stratonovich",
    seed: Annotated[int | None, typer.Option(help="Random seed (defaults to 1).")] = None,
    integrator: Annotated[str, typer.Option(help="euler or euler_jit.")] = "euler",
    output_dir: Annotated[str, typer.Option(help="Output directory.")] = "results",
    run_id: Annotated[str, typer.Option(help="Run identifier used for output folder.")] = "run_local",
) -> None:
    """Run one convergence validation and write its results."""
    if config:
        params = ValidationParams.model_validate(json.loads(Path(config).read_text()))
    else:
        options = {"SDEType": sde_type}
        if seed is not None:
            options["RandSeed"] = seed
        params = ValidationParams(
            dt_min=dt_min,
            dt_max=dt_max,
            num_dt=num_dt,
            n=n,
            a=a,
            b=b,
            integrator=integrator,
            options=options,
        )
    _run_single(params, output_dir, run_id)


if __name__ == "__main__":
    app()
