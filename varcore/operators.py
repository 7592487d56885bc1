from __future__ import annotations

import math
from typing import Callable, Union

from varcore.conversion import from_double, from_string
from varcore.errors import TypeMismatch, DivideByZero, VarcoreError
from varcore.types import Category, Variable

# Arithmetic yields a Variable, comparisons and logic a bool
OperatorResult = Union[Variable, bool]

NUMBER = Category.NUMBER
STRING = Category.STRING
INTEGER = Category.INTEGER


def _both(a: Variable, b: Variable, category: Category) -> bool:
    return a.category is category and b.category is category

# -------------------------------
# Arithmetic
# -------------------------------
def add(a: Variable, b: Variable) -> Variable:
    if _both(a, b, NUMBER):
        return from_double(a.as_double() + b.as_double())
    if _both(a, b, STRING):
        return from_string(a.as_string() + b.as_string())
    raise TypeMismatch("+", a.category, b.category)

def subtract(a: Variable, b: Variable) -> Variable:
    if _both(a, b, NUMBER):
        return from_double(a.as_double() - b.as_double())
    raise TypeMismatch("-", a.category, b.category)

def multiply(a: Variable, b: Variable) -> Variable:
    if _both(a, b, NUMBER):
        return from_double(a.as_double() * b.as_double())
    raise TypeMismatch("*", a.category, b.category)

def divide(a: Variable, b: Variable) -> Variable:
    if not _both(a, b, NUMBER):
        raise TypeMismatch("/", a.category, b.category)
    divisor = b.as_double()
    if divisor == 0:
        raise DivideByZero()
    return from_double(a.as_double() / divisor)

def remainder(a: Variable, b: Variable) -> Variable:
    if not _both(a, b, NUMBER):
        raise TypeMismatch("%", a.category, b.category)
    try:
        # Sign follows the dividend
        return from_double(math.fmod(a.as_double(), b.as_double()))
    except ValueError:
        # Zero divisor or infinite dividend
        return from_double(math.nan)

# -------------------------------
# Comparison
# -------------------------------
def _ordering(symbol: str, test: Callable[[object, object], bool]) -> Callable[[Variable, Variable], bool]:
    def compare(a: Variable, b: Variable) -> bool:
        if _both(a, b, NUMBER):
            return test(a.as_double(), b.as_double())
        if _both(a, b, STRING):
            # Ordinal: Python compares str by code point
            return test(a.as_string(), b.as_string())
        raise TypeMismatch(symbol, a.category, b.category)
    compare.__name__ = f"compare_{symbol}"
    return compare

greater = _ordering(">", lambda x, y: x > y)
less = _ordering("<", lambda x, y: x < y)
greater_equal = _ordering(">=", lambda x, y: x >= y)
less_equal = _ordering("<=", lambda x, y: x <= y)

def equals(a: Variable, b: Variable) -> bool:
    if _both(a, b, NUMBER):
        return a.as_double() == b.as_double()
    if _both(a, b, STRING):
        return a.as_string() == b.as_string()
    raise TypeMismatch("==", a.category, b.category)

def not_equals(a: Variable, b: Variable) -> bool:
    return not equals(a, b)

# -------------------------------
# Boolean logic
# -------------------------------
def logical_or(a: Variable, b: Variable) -> bool:
    if not _both(a, b, INTEGER):
        raise TypeMismatch("|", a.category, b.category)
    left, right = a.as_bool(), b.as_bool()
    return left or right

def logical_and(a: Variable, b: Variable) -> bool:
    if not _both(a, b, INTEGER):
        raise TypeMismatch("&", a.category, b.category)
    left, right = a.as_bool(), b.as_bool()
    return left and right

# -------------------------------
# Dispatch by symbol
# -------------------------------
BINARY_OPERATORS: dict[str, Callable[[Variable, Variable], OperatorResult]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "%": remainder,
    ">": greater,
    "<": less,
    ">=": greater_equal,
    "<=": less_equal,
    "==": equals,
    "!=": not_equals,
    "|": logical_or,
    "&": logical_and,
}


def apply_operator(symbol: str, a: Variable, b: Variable) -> OperatorResult:
    try:
        fn = BINARY_OPERATORS[symbol]
    except KeyError:
        raise VarcoreError(f"Unknown operator {symbol!r}") from None
    return fn(a, b)
