from .storage import read_sweep_result, write_sweep_result

__all__ = [
    "read_sweep_result",
    "write_sweep_result",
]
