from .euler import sde_euler
from .jit import sde_euler_jit
from .registry import available_integrators, get_integrator

__all__ = [
    "sde_euler",
    "sde_euler_jit",
    "get_integrator",
    "available_integrators",
]
