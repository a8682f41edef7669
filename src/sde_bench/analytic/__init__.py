from .gbm import sde_gbm

__all__ = ["sde_gbm"]
