from .access import sde_get, sde_set
from .params import SDEOptions

__all__ = [
    "SDEOptions",
    "sde_get",
    "sde_set",
]
