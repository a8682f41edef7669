from .comparison import (
    ComparisonResult,
    aggregate_errors,
    compare_at_step,
    linear_coefficients,
    time_grid,
)
from .euler_validate import run_validation, sde_euler_validate
from .inputs import SweepInputs, validate_inputs
from .params import ValidationParams
from .report import ORDERS, OrderFit, estimate_order, nearest_order, plot_convergence, report_timing
from .sweep import SweepResult, run_sweep

__all__ = [
    "ComparisonResult",
    "ORDERS",
    "OrderFit",
    "SweepInputs",
    "SweepResult",
    "ValidationParams",
    "aggregate_errors",
    "compare_at_step",
    "estimate_order",
    "linear_coefficients",
    "nearest_order",
    "plot_convergence",
    "report_timing",
    "run_sweep",
    "run_validation",
    "sde_euler_validate",
    "time_grid",
    "validate_inputs",
]
