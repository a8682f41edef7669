#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Annotated

import typer

from sde_bench.validation import ValidationParams

app = typer.Typer(add_completion=False)


@app.command()
def main(
    output: Annotated[str, typer.Option(help="Path to write the JSON config.")] = "config.json",
    dt_min: Annotated[float, typer.Option(help="Smallest step size.")] = 1e-3,
    dt_max: Annotated[float, typer.Option(help="Largest step size.")] = 1e-1,
    num_dt: Annotated[int, typer.Option(help="Number of log-spaced step sizes.")] = 3,
    n: Annotated[int, typer.Option(help="Number of paths per step size.")] = 1000,
    a: Annotated[float, typer.Option(help="Drift coefficient.")] = 1.0,
    b: Annotated[float, typer.Option(help="Diffusion coefficient.")] = 1.0,
    sde_type: Annotated[str, typer.Option(help="Stratonovich or Ito.")] = "Stratonovich",
    seed: Annotated[int, typer.Option(help="Random seed.")] = 1,
    integrator: Annotated[str, typer.Option(help="euler or euler_jit.")] = "euler",
) -> None:
    config = {
        "dt_min": dt_min,
        "dt_max": dt_max,
        "num_dt": num_dt,
        "n": n,
        "a": a,
        "b": b,
        "integrator": integrator,
        "options": {
            "SDEType": sde_type,
            "RandSeed": seed,
        },
    }
    # Fail early on a bad combination rather than at run time.
    ValidationParams.model_validate(config)

    path = Path(output)
    path.write_text(json.dumps(config, indent=2))


if __name__ == "__main__":
    app()
