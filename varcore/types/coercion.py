"""Projection rules from a (origin, payload) pair to native Python values.

Every function here is total: unparsable strings and non-finite doubles
collapse to zero-like defaults instead of raising.
"""

from __future__ import annotations

import math
import struct
from typing import Any

from varcore.types.category import Origin

INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1


def wrap_int(v: int, bits: int) -> int:
    """Two's complement truncation of `v` to `bits` bits."""
    mask = 1 << bits
    v &= mask - 1
    if v >= mask >> 1:
        v -= mask
    return v


def _parse_double(s: str) -> float:
    try:
        return float(s.strip())
    except ValueError:
        return 0.0


def _truncate(x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        return 0
    return math.trunc(x)


def _format_double(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def to_double(origin: Origin, payload: Any) -> float:
    if origin in (Origin.INT, Origin.LONG, Origin.BOOL, Origin.DOUBLE):
        return float(payload)
    if origin is Origin.STRING:
        return _parse_double(payload)
    return 0.0


def _to_integral(origin: Origin, payload: Any) -> int:
    if origin in (Origin.INT, Origin.LONG, Origin.BOOL):
        return int(payload)
    if origin is Origin.DOUBLE:
        return _truncate(payload)
    if origin is Origin.STRING:
        try:
            return int(payload.strip())
        except ValueError:
            return _truncate(_parse_double(payload))
    return 0


def to_int(origin: Origin, payload: Any) -> int:
    return wrap_int(_to_integral(origin, payload), 32)


def to_long(origin: Origin, payload: Any) -> int:
    return wrap_int(_to_integral(origin, payload), 64)


def to_bool(origin: Origin, payload: Any) -> bool:
    if origin is Origin.BOOL:
        return payload
    if origin in (Origin.INT, Origin.LONG, Origin.DOUBLE):
        return payload != 0
    if origin is Origin.STRING:
        text = payload.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        return _parse_double(payload) != 0
    return False


def to_single(x: float) -> float:
    """Round a double to the nearest IEEE single, overflowing to infinity."""
    try:
        return struct.unpack('f', struct.pack('f', x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def to_float(origin: Origin, payload: Any) -> float:
    return to_single(to_double(origin, payload))


def to_string(origin: Origin, payload: Any) -> str:
    if origin is Origin.STRING:
        return payload
    if origin is Origin.BOOL:
        return "true" if payload else "false"
    if origin in (Origin.INT, Origin.LONG):
        return str(payload)
    if origin is Origin.DOUBLE:
        return _format_double(payload)
    return ""
