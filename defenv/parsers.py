"""DEFENV FILE PURPOSE
Purpose: one pure parse routine per supported type, plus canonical duration text.
Hot path: yes (called for every present variable; no I/O).
Feature flags: none.
Failure mode: raise EnvSyntaxError / EnvRangeError; callers decide on fallback.
"""

from __future__ import annotations

import math
import re
import sys
from datetime import timedelta

from defenv.errors import EnvRangeError, EnvSyntaxError

# Width of the interpreter's native machine word (64 on 64-bit builds).
NATIVE_INT_BITS = sys.maxsize.bit_length() + 1

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")

_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_NS = 1
_US = 1_000 * _NS
_MS = 1_000 * _US
_SECOND = 1_000 * _MS
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNIT_NANOS = {
    "ns": _NS,
    "us": _US,
    "µs": _US,  # micro sign
    "μs": _US,  # greek mu
    "ms": _MS,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}
_DURATION_TOKEN_RE = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")
_MAX_NANOS = (1 << 63) - 1
_MIN_NANOS = -(1 << 63)
# Fraction digits past this point cannot move the result by a whole nanosecond.
_MAX_FRACTION_DIGITS = 18


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise EnvSyntaxError("bool", text)


def _check_bits(bits: int) -> None:
    if not isinstance(bits, int) or bits < 1:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")


def _bounded_int(digits: str, limit: int, type_name: str, text: str) -> int:
    # int() refuses very long digit strings, so reject by length first.
    significant = digits.lstrip("0")
    if len(significant) > len(str(limit)):
        raise EnvRangeError(type_name, text)
    return int(significant or "0")


def parse_int(text: str, bits: int = 64, *, type_name: str | None = None) -> int:
    """Parse base-10 signed integer text that must fit in ``bits`` two's-complement bits."""
    _check_bits(bits)
    type_name = type_name or f"int{bits}"
    if not _INT_RE.fullmatch(text):
        raise EnvSyntaxError(type_name, text)

    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    hi = (1 << (bits - 1)) - 1
    lo = -(1 << (bits - 1))

    magnitude = _bounded_int(digits, -lo, type_name, text)
    value = -magnitude if negative else magnitude
    if value < lo or value > hi:
        raise EnvRangeError(type_name, text)
    return value


def parse_uint(text: str, bits: int = 64, *, type_name: str | None = None) -> int:
    """Parse base-10 unsigned integer text; any sign, even ``+``, is a syntax error."""
    _check_bits(bits)
    type_name = type_name or f"uint{bits}"
    if not _UINT_RE.fullmatch(text):
        raise EnvSyntaxError(type_name, text)

    hi = (1 << bits) - 1
    value = _bounded_int(text, hi, type_name, text)
    if value > hi:
        raise EnvRangeError(type_name, text)
    return value


def parse_float(text: str) -> float:
    """Parse decimal, scientific, hexadecimal (``0x1.8p3``) or inf/nan text as a double.

    Finite text that overflows a double is a range error rather than ``inf``.
    """
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)

    if _DECIMAL_FLOAT_RE.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise EnvRangeError("float64", text) from None
    else:
        raise EnvSyntaxError("float64", text)

    if math.isinf(value):
        raise EnvRangeError("float64", text)
    return value


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of ``<number><unit>`` tokens, e.g. ``2h5m20s`` or ``-1.5ms``.

    Valid units are ns, us (or µs), ms, s, m and h. A bare ``0`` is the only
    unitless value accepted. The sum is computed in nanoseconds, must fit a
    signed 64-bit count, and is truncated toward zero to microseconds.
    """
    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return timedelta(0)
    if not s:
        raise EnvSyntaxError("duration", text, "invalid duration")

    total = 0
    while s:
        if not (s[0] == "." or "0" <= s[0] <= "9"):
            raise EnvSyntaxError("duration", text, "invalid duration")

        m = _DURATION_TOKEN_RE.match(s)
        whole, frac, unit = m.group("whole"), m.group("frac") or "", m.group("unit")
        if not whole and not frac:
            raise EnvSyntaxError("duration", text, "invalid duration")
        if not unit:
            raise EnvSyntaxError("duration", text, f"missing unit in duration {text}")
        scale = _UNIT_NANOS.get(unit)
        if scale is None:
            raise EnvSyntaxError("duration", text, f"unknown unit {unit!r} in duration {text}")

        total += _bounded_int(whole, _MAX_NANOS, "duration", text) * scale
        if frac:
            frac = frac[:_MAX_FRACTION_DIGITS]
            total += int(frac) * scale // 10 ** len(frac)
        if total > -_MIN_NANOS:
            raise EnvRangeError("duration", text)
        s = s[m.end():]

    nanos = -total if negative else total
    if nanos > _MAX_NANOS or nanos < _MIN_NANOS:
        raise EnvRangeError("duration", text)

    micros = total // _US
    return timedelta(microseconds=-micros if negative else micros)


def _with_fraction(whole: int, frac: int, width: int) -> str:
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Render ``value`` in the text form ``parse_duration`` reads back exactly.

    Raises ValueError for values outside the signed 64-bit nanosecond range,
    which ``parse_duration`` would reject.
    """
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if not _MIN_NANOS <= micros * _US <= _MAX_NANOS:
        raise ValueError(f"duration {value!r} is outside the 64-bit nanosecond range")
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros == 0:
        return "0s"
    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_with_fraction(micros // 1_000, micros % 1_000, 3)}ms"

    seconds, frac = divmod(micros, 1_000_000)
    out = f"{_with_fraction(seconds % 60, frac, 6)}s"
    minutes = seconds // 60
    if minutes:
        out = f"{minutes % 60}m{out}"
        hours = minutes // 60
        if hours:
            out = f"{hours}h{out}"
    return sign + out
