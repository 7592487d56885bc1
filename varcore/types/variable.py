"""The dynamically-typed scalar value of the script runtime.

A Variable pairs a native payload with an `Origin` (the literal form it was
built from) and a `Category` (what operator dispatch sees). Values are
immutable; operators always build new ones.
"""

from __future__ import annotations

from typing import Any, Optional

from varcore.types.category import Category, Origin, category_of
from varcore.types import coercion


class Variable:
    __slots__ = ("payload", "origin", "category")

    def __init__(self, payload: Any = None, origin: Origin = Origin.NONE,
                 category: Optional[Category] = None):
        object.__setattr__(self, "payload", payload)
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "category", category_of(origin) if category is None else category)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Variable is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Variable is immutable; cannot delete {name!r}")

    def with_category(self, category: Category) -> Variable:
        """Same payload and origin, explicitly overridden category."""
        return Variable(self.payload, self.origin, category)

    # --- Conversion boundary: projections ---
    def as_int(self) -> int:
        return coercion.to_int(self.origin, self.payload)

    def as_long(self) -> int:
        return coercion.to_long(self.origin, self.payload)

    def as_bool(self) -> bool:
        return coercion.to_bool(self.origin, self.payload)

    def as_float(self) -> float:
        return coercion.to_float(self.origin, self.payload)

    def as_double(self) -> float:
        return coercion.to_double(self.origin, self.payload)

    def as_string(self) -> str:
        return coercion.to_string(self.origin, self.payload)

    def __bool__(self) -> bool:
        return self.as_bool()

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_double()

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"Variable({self.payload!r}, {self.origin.name}, {self.category.name})"

    # --- Operators: delegate to varcore.operators ---
    def _binary(self, other: Any, symbol: str, reflected: bool = False) -> Any:
        if other is None:
            return NotImplemented
        # Lazy import to avoid circular imports
        from varcore.conversion import from_native
        from varcore.errors import ConversionError
        from varcore.operators import apply_operator
        try:
            other = from_native(other)
        except ConversionError:
            return NotImplemented
        if reflected:
            return apply_operator(symbol, other, self)
        return apply_operator(symbol, self, other)

    def __add__(self, other): return self._binary(other, "+")
    def __radd__(self, other): return self._binary(other, "+", True)
    def __sub__(self, other): return self._binary(other, "-")
    def __rsub__(self, other): return self._binary(other, "-", True)
    def __mul__(self, other): return self._binary(other, "*")
    def __rmul__(self, other): return self._binary(other, "*", True)
    def __truediv__(self, other): return self._binary(other, "/")
    def __rtruediv__(self, other): return self._binary(other, "/", True)
    def __mod__(self, other): return self._binary(other, "%")
    def __rmod__(self, other): return self._binary(other, "%", True)

    def __gt__(self, other): return self._binary(other, ">")
    def __lt__(self, other): return self._binary(other, "<")
    def __ge__(self, other): return self._binary(other, ">=")
    def __le__(self, other): return self._binary(other, "<=")
    def __eq__(self, other): return self._binary(other, "==")
    def __ne__(self, other): return self._binary(other, "!=")
    # == raises across categories, so no hash can agree with it
    __hash__ = None

    def __or__(self, other): return self._binary(other, "|")
    def __ror__(self, other): return self._binary(other, "|", True)
    def __and__(self, other): return self._binary(other, "&")
    def __rand__(self, other): return self._binary(other, "&", True)


EMPTY = Variable()
