from pathlib import Path

import h5py
import numpy as np

from sde_bench.validation.sweep import SweepResult

_ATTRS = ("n", "a", "b", "sde_type", "integrator", "total_time", "nsteps")


def write_sweep_result(path, result: SweepResult) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with h5py.File(path, "w", libver="latest") as fh:
        for name in ("dt", "mean", "std", "step_times"):
            fh.create_dataset(
                name,
                data=np.asarray(getattr(result, name), dtype=np.float64),
                compression="gzip",
                compression_opts=4,
            )
        fh.attrs["n"] = int(result.n)
        fh.attrs["a"] = float(result.a)
        fh.attrs["b"] = float(result.b)
        fh.attrs["sde_type"] = result.sde_type
        fh.attrs["integrator"] = result.integrator
        fh.attrs["total_time"] = float(result.total_time)
        fh.attrs["nsteps"] = int(result.nsteps)


def read_sweep_result(path) -> SweepResult:
    with h5py.File(Path(path), "r") as fh:
        missing = [key for key in _ATTRS if key not in fh.attrs]
        if missing:
            raise ValueError(f"Missing attributes in {path}: {missing}")
        data = {name: np.asarray(fh[name][...], dtype=float) for name in ("dt", "mean", "std", "step_times")}
        attrs = dict(fh.attrs)

    def _str(v):
        return v.decode("utf-8") if isinstance(v, bytes) else str(v)

    return SweepResult(
        dt=data["dt"],
        mean=data["mean"],
        std=data["std"],
        n=int(attrs["n"]),
        a=float(attrs["a"]),
        b=float(attrs["b"]),
        sde_type=_str(attrs["sde_type"]),
        integrator=_str(attrs["integrator"]),
        total_time=float(attrs["total_time"]),
        nsteps=int(attrs["nsteps"]),
        step_times=data["step_times"],
    )
