"""DEFENV FILE PURPOSE
Purpose: typed environment variable accessors with default fallback (ordinary + strict).
Hot path: yes (read-only env lookups; no caching).
Feature flags: DEFENV_DEBUG (logs ordinary fallbacks caused by bad values).
Failure mode: ordinary => default on absence or bad value; strict => default only on absence,
(zero, error) on a bad value.

    from defenv.accessors import get_int, get_int_strict

    workers = get_int("WORKER_NUMBER", 8)
    workers, err = get_int_strict("WORKER_NUMBER", 8)
"""

from __future__ import annotations

from datetime import timedelta
from functools import partial
from typing import Any, Callable, NamedTuple

from defenv.config import is_debug, lookup_env
from defenv.errors import EnvParseError
from defenv.logging import logger
from defenv.parsers import (
    NATIVE_INT_BITS,
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_uint,
)

_parse_native_int = partial(parse_int, bits=NATIVE_INT_BITS, type_name="int")
_parse_int64 = partial(parse_int, bits=64, type_name="int64")
_parse_native_uint = partial(parse_uint, bits=NATIVE_INT_BITS, type_name="uint")
_parse_uint64 = partial(parse_uint, bits=64, type_name="uint64")


class StrictResult(NamedTuple):
    """Outcome of a strict accessor; unpacks as ``(value, error)``.

    When ``error`` is set, ``value`` is the type's zero value, not the default.
    """

    value: Any
    error: EnvParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def _ordinary(name: str, default: Any, parse: Callable[[str], Any]) -> Any:
    raw = lookup_env(name)
    if raw is None:
        return default
    try:
        return parse(raw)
    except EnvParseError as e:
        if is_debug():
            logger.warning("ENV_FALLBACK name=%s type=%s reason=%s", name, e.type_name, e.category)
        return default


def _strict(name: str, default: Any, parse: Callable[[str], Any], zero: Any) -> StrictResult:
    raw = lookup_env(name)
    if raw is None:
        return StrictResult(default)
    try:
        return StrictResult(parse(raw))
    except EnvParseError as e:
        return StrictResult(zero, e.for_variable(name))


def get_bool(name: str, default: bool) -> bool:
    """Accepts 1, t, T, TRUE, true, True and 0, f, F, FALSE, false, False."""
    return _ordinary(name, default, parse_bool)


def get_bool_strict(name: str, default: bool) -> StrictResult:
    return _strict(name, default, parse_bool, False)


def get_duration(name: str, default: timedelta) -> timedelta:
    return _ordinary(name, default, parse_duration)


def get_duration_strict(name: str, default: timedelta) -> StrictResult:
    return _strict(name, default, parse_duration, timedelta(0))


def get_float64(name: str, default: float) -> float:
    return _ordinary(name, default, parse_float)


def get_float64_strict(name: str, default: float) -> StrictResult:
    return _strict(name, default, parse_float, 0.0)


def get_int(name: str, default: int) -> int:
    """Signed integer bounded by the native word width (``NATIVE_INT_BITS``)."""
    return _ordinary(name, default, _parse_native_int)


def get_int_strict(name: str, default: int) -> StrictResult:
    return _strict(name, default, _parse_native_int, 0)


def get_int64(name: str, default: int) -> int:
    return _ordinary(name, default, _parse_int64)


def get_int64_strict(name: str, default: int) -> StrictResult:
    return _strict(name, default, _parse_int64, 0)


def get_string(name: str, default: str) -> str:
    # "" is a present value; only absence selects the default.
    raw = lookup_env(name)
    return default if raw is None else raw


def get_uint(name: str, default: int) -> int:
    """Unsigned integer bounded by the native word width; negative text is rejected."""
    return _ordinary(name, default, _parse_native_uint)


def get_uint_strict(name: str, default: int) -> StrictResult:
    return _strict(name, default, _parse_native_uint, 0)


def get_uint64(name: str, default: int) -> int:
    return _ordinary(name, default, _parse_uint64)


def get_uint64_strict(name: str, default: int) -> StrictResult:
    return _strict(name, default, _parse_uint64, 0)


__all__ = [
    "StrictResult",
    "get_bool",
    "get_bool_strict",
    "get_duration",
    "get_duration_strict",
    "get_float64",
    "get_float64_strict",
    "get_int",
    "get_int_strict",
    "get_int64",
    "get_int64_strict",
    "get_string",
    "get_uint",
    "get_uint_strict",
    "get_uint64",
    "get_uint64_strict",
]
