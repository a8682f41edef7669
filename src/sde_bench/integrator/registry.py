from .euler import sde_euler
from .jit import sde_euler_jit

# name -> (integrator, coefficients must be numba-compiled)
_REGISTRY = {
    "euler": (sde_euler, False),
    "euler_jit": (sde_euler_jit, True),
}


def get_integrator(name: str):
    if name not in _REGISTRY:
        raise ValueError(f"Unknown integrator '{name}'. Available: {list(_REGISTRY)}")
    return _REGISTRY[name]


def available_integrators() -> list[str]:
    return list(_REGISTRY)
