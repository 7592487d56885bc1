"""Two-level type tags for runtime values.

`Category` is the coarse tag operator dispatch looks at. `Origin` records the
literal form a value was built from and only matters when a value is turned
into a typed constant for the compiler.
"""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    NONE = 0
    NUMBER = 1
    STRING = 2
    INTEGER = 3


class Origin(Enum):
    NONE = 0
    INT = 1
    LONG = 2
    BOOL = 3
    DOUBLE = 4
    STRING = 5


_CATEGORY_BY_ORIGIN = {
    Origin.NONE: Category.NONE,
    Origin.INT: Category.NUMBER,
    Origin.LONG: Category.NUMBER,
    Origin.BOOL: Category.NUMBER,
    Origin.DOUBLE: Category.NUMBER,
    Origin.STRING: Category.STRING,
}


def category_of(origin: Origin) -> Category:
    """Default category for a value built from `origin`."""
    return _CATEGORY_BY_ORIGIN[origin]
