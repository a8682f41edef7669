"""Strong convergence order and throughput check for ``sde_euler``.

The Euler scheme is run over a sweep of step sizes on the linear SDE
``dy = a*y dt + b*y dW`` and compared against the closed-form geometric Brownian
motion driven by the same Brownian path. Euler-Heun (Stratonovich) should show
order 1.0, Euler-Maruyama (Ito) order 0.5.

Example::

    dt = np.logspace(-3, -1, 3)
    opts = sde_set(RandSeed=1)
    sde_euler_validate(dt, 1000, 1.0, 1.0, opts)
    sde_euler_validate(dt, 1000, 1.0, 1.0, sde_set(opts, SDEType="Ito"))

For details of the method see Kloeden and Platen, "Numerical Solution of Stochastic
Differential Equations", Springer, 1992.
"""
from sde_bench.options import SDEOptions

from .errors import (
    IncompleteModelParametersError,
    NotEnoughInputsError,
    TooManyInputsError,
)
from .inputs import validate_inputs
from .report import plot_convergence, report_timing
from .sweep import SweepResult, run_sweep


def _is_options(x) -> bool:
    return x is None or isinstance(x, (dict, SDEOptions))


def parse_model_args(args: tuple):
    """Split trailing positional arguments into ``(a, b, options)``."""
    if len(args) == 0:
        return None, None, None
    if len(args) == 1:
        if _is_options(args[0]):
            return None, None, args[0]
        raise IncompleteModelParametersError("Both a and b must be specified.")
    if len(args) == 2:
        return args[0], args[1], None
    if len(args) == 3:
        return args
    raise TooManyInputsError("Too many input arguments.")


def run_validation(dt, n, *args, nout: int = 2, integrator: str = "euler") -> SweepResult:
    if dt is None or n is None:
        raise NotEnoughInputsError("Not enough input arguments: dt and n are required.")
    a, b, options = parse_model_args(args)
    inputs = validate_inputs(dt, n, a, b, options, nout=nout)
    return run_sweep(inputs, integrator=integrator)


def sde_euler_validate(dt=None, n=None, *args, nout: int = 2, integrator: str = "euler", ax=None):
    """Validate ``sde_euler`` over the step sizes ``dt`` with ``n`` paths each.

    Call as ``(dt, n)``, ``(dt, n, options)``, ``(dt, n, a, b)`` or
    ``(dt, n, a, b, options)``. ``nout`` selects the return value: ``None`` (timing is
    printed instead), the mean absolute errors, or ``(mean, std)``; both ordered by
    ascending step size. A log-log convergence plot is always drawn, on ``ax`` if given,
    otherwise on a new figure.
    """
    result = run_validation(dt, n, *args, nout=nout, integrator=integrator)

    if nout == 0:
        report_timing(result)
    plot_convergence(result, ax=ax)

    if nout == 0:
        return None
    if nout == 1:
        return result.mean
    return result.mean, result.std
