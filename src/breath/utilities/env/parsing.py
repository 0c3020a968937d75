import os
from typing import Callable, TypeVar

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}

NumberT = TypeVar("NumberT", int, float)


def _raw(env_var: str) -> str | None:
    """Return the stripped value of ``env_var``; blank values count as unset."""
    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return None
    return value.strip()


def _convert(
    env_var: str, value: str, parse: Callable[[str], NumberT], kind: str
) -> NumberT:
    try:
        return parse(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}") from exc


def _check_bounds(
    env_var: str,
    value: NumberT,
    minimum: NumberT | None,
    maximum: NumberT | None,
    exclusive_minimum: bool = False,
) -> NumberT:
    if minimum is not None:
        if exclusive_minimum and value <= minimum:
            raise ValueError(f"{env_var} must be greater than {minimum}")
        if value < minimum:
            raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return value


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    value = _raw(env_var)
    if value is None:
        return default
    return value.lower() in TRUE_FLAG_VALUES


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    value = _raw(env_var)
    if value is None:
        return None
    return _check_bounds(
        env_var, _convert(env_var, value, int, "an integer"), minimum, None
    )


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    parsed = _env_optional_int(env_var, minimum=minimum)
    return default if parsed is None else parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: bool = False,
) -> float:
    """Read a float, checking ``minimum`` (inclusive unless ``exclusive_minimum``) and ``maximum``."""
    value = _raw(env_var)
    if value is None:
        return default
    parsed = _convert(env_var, value, float, "a float")
    return _check_bounds(env_var, parsed, minimum, maximum, exclusive_minimum)
