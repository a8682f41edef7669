from .wiener import brownian_increments, brownian_path

__all__ = [
    "brownian_increments",
    "brownian_path",
]
