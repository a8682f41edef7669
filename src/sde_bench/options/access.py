from typing import Any

from .params import SDEOptions, option_names


def _resolve(name: str) -> str:
    names = option_names()
    key = str(name).lower()
    if key not in names:
        available = sorted(info.alias for info in SDEOptions.model_fields.values())
        raise ValueError(f"Unknown SDE option '{name}'. Available: {available}")
    return names[key]


def _as_dict(options) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, SDEOptions):
        return {name: getattr(options, name) for name in SDEOptions.model_fields}
    if isinstance(options, dict):
        return {_resolve(k): v for k, v in options.items()}
    raise TypeError(f"Options must be None, a dict or SDEOptions, got {type(options).__name__}")


def sde_set(options=None, **overrides) -> SDEOptions:
    """Return a new options record with ``overrides`` merged on top of ``options``.

    Keys may be field names (``sde_type``) or external names (``SDEType``), in any case.
    The input record is never modified.
    """
    merged = _as_dict(options)
    for key, value in overrides.items():
        merged[_resolve(key)] = value
    return SDEOptions.model_validate(merged)


def sde_get(options, name: str, default=None, kind: str | None = None):
    field = _resolve(name)
    if options is None:
        value = None
    elif isinstance(options, SDEOptions):
        value = getattr(options, field)
    else:
        value = _as_dict(options).get(field)

    if value is None:
        return default
    if kind == "flag" and isinstance(value, bool):
        return "yes" if value else "no"
    return value
