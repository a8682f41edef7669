from dataclasses import dataclass

import numpy as np
from pydantic import ValidationError

from sde_bench.options import SDEOptions, sde_get, sde_set
from sde_bench.options.params import option_names

from .errors import (
    BadEnsembleSizeError,
    BadSweepLengthError,
    IncompleteModelParametersError,
    InvalidConfigurationError,
    InvalidEnsembleSizeError,
    InvalidModelParameterError,
    InvalidStepSizesError,
    TooManyOutputsError,
    UnsupportedAntitheticError,
    UnsupportedRandomSourceError,
)

DEFAULT_SEED = 1
MAX_OUTPUTS = 2


@dataclass(frozen=True)
class SweepInputs:
    dt: np.ndarray
    n: int
    a: float
    b: float
    options: SDEOptions


def _real_array(x) -> np.ndarray | None:
    if isinstance(x, (bool, np.bool_)):
        return None
    try:
        arr = np.asarray(x)
    except (TypeError, ValueError):
        return None
    if arr.dtype.kind not in "iuf":
        return None
    return arr


def _real_scalar(x) -> float | None:
    arr = _real_array(x)
    if arr is None or arr.ndim != 0 or not np.isfinite(arr):
        return None
    return float(arr)


def check_step_sizes(dt) -> np.ndarray:
    arr = _real_array(dt)
    if arr is None or arr.ndim != 1 or not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise InvalidStepSizesError("dt must be a finite, positive, real 1-D vector.")
    if arr.size < 2:
        raise BadSweepLengthError("Input vector dt must have length >= 2.")
    return np.sort(arr.astype(float))


def check_ensemble_size(n) -> int:
    value = _real_scalar(n)
    if value is None:
        raise InvalidEnsembleSizeError("n must be a finite real scalar.")
    if value < 1 or value != np.floor(value):
        raise BadEnsembleSizeError("Input n must be an integer >= 1.")
    return int(value)


def check_model_parameters(a, b) -> tuple[float, float]:
    if a is None and b is None:
        return 1.0, 1.0
    if a is None or b is None:
        raise IncompleteModelParametersError("Both a and b must be specified.")
    checked = []
    for name, value in (("a", a), ("b", b)):
        scalar = _real_scalar(value)
        if scalar is None:
            raise InvalidModelParameterError(f"{name} must be a finite real scalar.")
        checked.append(scalar)
    return checked[0], checked[1]


def _is_empty(value) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, np.ndarray):
        return value.size == 0
    return False


def check_options(options) -> SDEOptions:
    if options is None:
        return SDEOptions()
    if isinstance(options, SDEOptions):
        return options
    if isinstance(options, (list, tuple)) and len(options) == 0:
        return SDEOptions()
    if isinstance(options, np.ndarray) and options.size == 0:
        return SDEOptions()
    if not isinstance(options, dict):
        raise InvalidConfigurationError("Invalid SDE options; expected a dict or SDEOptions.")

    names = option_names()
    options = dict(options)
    for key in list(options):
        if names.get(str(key).lower()) != "rand_fun":
            continue
        if not _is_empty(options[key]):
            raise UnsupportedRandomSourceError(
                "Only the default random number stream is supported."
            )
        del options[key]
    try:
        return sde_set(options)
    except (ValidationError, ValueError) as exc:
        raise InvalidConfigurationError(f"Invalid SDE options: {exc}") from exc


def normalize_options(options: SDEOptions) -> SDEOptions:
    if sde_get(options, "RandFUN") is not None:
        raise UnsupportedRandomSourceError(
            "Only the default random number stream is supported."
        )
    if sde_get(options, "Antithetic", "no", "flag") == "yes":
        raise UnsupportedAntitheticError("Antithetic random variates are not supported.")

    if sde_get(options, "RandSeed") is None:
        options = sde_set(options, RandSeed=DEFAULT_SEED)

    # Always benchmark the general code path.
    return sde_set(options, DiagonalNoise="yes", ConstFFUN="no", ConstGFUN="no")


def check_outputs(nout: int) -> int:
    if isinstance(nout, (bool, np.bool_)) or not isinstance(nout, (int, np.integer)):
        raise ValueError("nout must be an integer >= 0.")
    if nout > MAX_OUTPUTS:
        raise TooManyOutputsError("Too many output arguments.")
    if nout < 0:
        raise ValueError("nout must be an integer >= 0.")
    return int(nout)


def validate_inputs(dt, n, a=None, b=None, options=None, nout: int = 2) -> SweepInputs:
    """Check and normalize everything the sweep needs; nothing is simulated here.

    The step sizes come back sorted ascending. A missing seed is filled with
    ``DEFAULT_SEED`` so repeated runs are reproducible.
    """
    check_outputs(nout)
    dt = check_step_sizes(dt)
    n = check_ensemble_size(n)
    a, b = check_model_parameters(a, b)
    options = normalize_options(check_options(options))
    return SweepInputs(dt=dt, n=n, a=a, b=b, options=options)
