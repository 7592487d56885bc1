# Value-and-operator core of a small scripting runtime.
#
# A Variable wraps one native scalar (int32, int64, bool, double or string)
# and records both the literal form it came from (Origin) and the coarse
# category operators dispatch on (Category). The public surface below is
# what an interpreter needs: build values from literals, combine them with
# operators, read native values back, and materialize typed constants for
# compiled expressions.

from typing import Union

from varcore.errors import (
    VarcoreError, TypeMismatch, DivideByZero, ConversionError, CompileError, VMError,
)
from varcore.types import Category, Origin, Variable, EMPTY, category_of
from varcore.conversion import (
    from_int, from_long, from_bool, from_float, from_double, from_string, from_native,
)
from varcore.operators import (
    add, subtract, multiply, divide, remainder,
    greater, less, greater_equal, less_equal, equals, not_equals,
    logical_or, logical_and, apply_operator, BINARY_OPERATORS, OperatorResult,
)
from varcore.compiler.nodes import NativeType, ConstantNode, BinaryNode
from varcore.compiler.materialize import to_expression_node, from_expression_node

# Native primitives accepted at the conversion boundary
NativeValue = Union[int, float, bool, str, None]
