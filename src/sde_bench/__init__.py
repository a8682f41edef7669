from .analytic import sde_gbm
from .integrator import sde_euler, sde_euler_jit
from .options import SDEOptions, sde_get, sde_set
from .validation import sde_euler_validate

__all__ = [
    "SDEOptions",
    "sde_euler",
    "sde_euler_jit",
    "sde_euler_validate",
    "sde_gbm",
    "sde_get",
    "sde_set",
]
