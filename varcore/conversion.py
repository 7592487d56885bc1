"""Native primitives into Variables.

The projections back out (`as_int`, `as_double`, ...) live on Variable itself;
this module is the construction half of the conversion boundary.
"""

from __future__ import annotations

from typing import Any, Optional

from varcore.errors import ConversionError
from varcore.types.category import Category, Origin
from varcore.types.coercion import INT32_MIN, INT32_MAX, INT64_MIN, INT64_MAX, to_single
from varcore.types.variable import Variable, EMPTY


def _check_integral(x: Any, lo: int, hi: int, kind: str) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise ConversionError(f"{kind} requires an int, got {type(x).__name__}")
    if not lo <= x <= hi:
        raise ConversionError(f"{x} is out of range for {kind}")
    return x


def from_int(x: int, *, category: Optional[Category] = None) -> Variable:
    return Variable(_check_integral(x, INT32_MIN, INT32_MAX, "int32"), Origin.INT, category)


def from_long(x: int, *, category: Optional[Category] = None) -> Variable:
    return Variable(_check_integral(x, INT64_MIN, INT64_MAX, "int64"), Origin.LONG, category)


def from_bool(x: bool, *, category: Optional[Category] = None) -> Variable:
    return Variable(bool(x), Origin.BOOL, category)


def from_double(x: float, *, category: Optional[Category] = None) -> Variable:
    if isinstance(x, (str, bytes)):
        raise ConversionError(f"double requires a number, got {type(x).__name__}")
    try:
        return Variable(float(x), Origin.DOUBLE, category)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(f"Cannot convert {x!r} to double") from e


def from_float(x: float, *, category: Optional[Category] = None) -> Variable:
    # No separate float origin: round to single, then store the widened double
    v = from_double(x)
    return from_double(to_single(v.payload), category=category)


def from_string(x: str, *, category: Optional[Category] = None) -> Variable:
    if not isinstance(x, str):
        raise ConversionError(f"string requires a str, got {type(x).__name__}")
    return Variable(x, Origin.STRING, category)


def from_native(x: Any, *, category: Optional[Category] = None) -> Variable:
    """Wrap a Python primitive, picking the origin from its type.

    bool is checked before int since it is an int subclass. Integers that do
    not fit 32 bits become 64-bit longs.
    """
    if isinstance(x, Variable):
        return x if category is None else x.with_category(category)
    if x is None:
        return EMPTY if category is None else EMPTY.with_category(category)
    if isinstance(x, bool):
        return from_bool(x, category=category)
    if isinstance(x, int):
        if INT32_MIN <= x <= INT32_MAX:
            return from_int(x, category=category)
        return from_long(x, category=category)
    if isinstance(x, float):
        return from_double(x, category=category)
    if isinstance(x, str):
        return from_string(x, category=category)
    raise ConversionError(f"Cannot convert {type(x).__name__} to a Variable")
