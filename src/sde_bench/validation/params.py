from typing import Any, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Explicit step sizes, or a log-spaced sweep between dt_min and dt_max.
    dt: list[float] | None = None
    dt_min: float = Field(1e-3, gt=0)
    dt_max: float = Field(1e-1, gt=0)
    num_dt: int = Field(3, ge=2)

    n: int = Field(1000, ge=1)
    a: float = 1.0
    b: float = 1.0
    integrator: Literal["euler", "euler_jit"] = "euler"
    options: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_range(self):
        if self.dt is None and self.dt_min >= self.dt_max:
            raise ValueError("dt_min must be < dt_max")
        return self

    def step_sizes(self) -> np.ndarray:
        if self.dt is not None:
            return np.asarray(self.dt, dtype=float)
        return np.logspace(np.log10(self.dt_min), np.log10(self.dt_max), self.num_dt)
