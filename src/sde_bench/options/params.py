from typing import Any, Callable, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SDEOptions(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    sde_type: Literal["Stratonovich", "Ito"] = Field("Stratonovich", alias="SDEType")
    rand_seed: int | None = Field(None, ge=0, alias="RandSeed")
    # Either a callable (m, n) -> standard normals, or a pinned Brownian path.
    rand_fun: Callable[..., Any] | np.ndarray | None = Field(None, alias="RandFUN")
    antithetic: bool = Field(False, alias="Antithetic")

    diagonal_noise: bool = Field(True, alias="DiagonalNoise")
    const_ffun: bool = Field(False, alias="ConstFFUN")
    const_gfun: bool = Field(False, alias="ConstGFUN")

    @field_validator("sde_type", mode="before")
    @classmethod
    def _normalize_sde_type(cls, v):
        if isinstance(v, str):
            for name in ("Stratonovich", "Ito"):
                if v.strip().lower() == name.lower():
                    return name
        return v

    @field_validator("rand_fun", mode="before")
    @classmethod
    def _as_path_array(cls, v):
        if v is None or callable(v):
            return v
        arr = np.asarray(v, dtype=float)
        if arr.ndim != 2:
            raise ValueError("RandFUN path must be a 2-D array (time x paths)")
        if not np.all(np.isfinite(arr)):
            raise ValueError("RandFUN path must be finite")
        return arr


def option_names() -> dict[str, str]:
    # lower-cased field names and aliases -> field name
    names = {}
    for field, info in SDEOptions.model_fields.items():
        names[field.lower()] = field
        if info.alias:
            names[info.alias.lower()] = field
    return names
