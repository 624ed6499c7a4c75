import os


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_optional_float(
    env_var: str,
    *,
    exclusive_minimum: float | None = None,
) -> float | None:
    """Return the float value of ``env_var`` or ``None`` when unset."""

    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    if exclusive_minimum is not None and parsed <= exclusive_minimum:
        raise ValueError(f"{env_var} must be greater than {exclusive_minimum}")
    return parsed
