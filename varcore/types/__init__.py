from __future__ import annotations

from .category import Category, Origin, category_of
from .variable import Variable, EMPTY

__all__ = [
    "Category",
    "Origin",
    "category_of",
    "Variable",
    "EMPTY",
]
