import importlib.util
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sde_bench.utils.storage import read_sweep_result

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"
runner = CliRunner()


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def run_validation_app():
    return _load_script("run_validation").app


@pytest.fixture(scope="module")
def create_config_app():
    return _load_script("create_config").app


def test_run_from_flags(run_validation_app, tmp_path):
    result = runner.invoke(
        run_validation_app,
        [
            "--dt-min", "0.05",
            "--dt-max", "0.1",
            "--num-dt", "2",
            "--n", "8",
            "--sde-type", "Ito",
            "--output-dir", str(tmp_path),
            "--run-id", "flags",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Total simulation time:" in result.output
    assert "Empirical order:" in result.output

    run_dir = tmp_path / "flags"
    for name in ("config_used.json", "convergence.h5", "timings.json", "convergence.png"):
        assert (run_dir / name).exists()

    stored = read_sweep_result(run_dir / "convergence.h5")
    assert stored.sde_type == "Ito"
    assert stored.n == 8
    timings = json.loads((run_dir / "timings.json").read_text())
    assert timings["nsteps"] == stored.nsteps == 41 + 21


def test_run_from_config(create_config_app, run_validation_app, tmp_path):
    config_path = tmp_path / "config.json"
    result = runner.invoke(
        create_config_app,
        ["--output", str(config_path), "--dt-min", "0.025", "--dt-max", "0.1", "--n", "4", "--seed", "7"],
    )
    assert result.exit_code == 0, result.output
    config = json.loads(config_path.read_text())
    assert config["options"] == {"SDEType": "Stratonovich", "RandSeed": 7}

    result = runner.invoke(
        run_validation_app,
        ["--config", str(config_path), "--output-dir", str(tmp_path), "--run-id", "cfg"],
    )
    assert result.exit_code == 0, result.output
    used = json.loads((tmp_path / "cfg" / "config_used.json").read_text())
    assert len(used["dt"]) == 3
    assert used["options"]["RandSeed"] == 7


def test_create_config_rejects_bad_range(create_config_app, tmp_path):
    result = runner.invoke(
        create_config_app,
        ["--output", str(tmp_path / "bad.json"), "--dt-min", "0.1", "--dt-max", "0.01"],
    )
    assert result.exit_code != 0
    assert not (tmp_path / "bad.json").exists()
