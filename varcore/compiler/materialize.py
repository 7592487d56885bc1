"""Projection of Variables into typed constant nodes and back."""

from __future__ import annotations

from varcore.conversion import from_int, from_long, from_bool, from_double, from_string
from varcore.types import EMPTY, Origin, Variable

from .nodes import ConstantNode, NativeType


def to_expression_node(value: Variable) -> ConstantNode:
    """Typed constant for `value`, chosen by its origin.

    Never fails: an origin outside the five literal forms yields a string
    constant with no payload.
    """
    origin = value.origin
    if origin is Origin.INT:
        return ConstantNode(NativeType.INT32, value.as_int())
    if origin is Origin.LONG:
        return ConstantNode(NativeType.INT64, value.as_long())
    if origin is Origin.BOOL:
        return ConstantNode(NativeType.BOOL, value.as_bool())
    if origin is Origin.DOUBLE:
        return ConstantNode(NativeType.DOUBLE, value.as_double())
    if origin is Origin.STRING:
        return ConstantNode(NativeType.STRING, value.as_string())
    return ConstantNode(NativeType.STRING, None)


_BUILDERS = {
    NativeType.INT32: from_int,
    NativeType.INT64: from_long,
    NativeType.BOOL: from_bool,
    NativeType.DOUBLE: from_double,
    NativeType.STRING: from_string,
}


def from_expression_node(node: ConstantNode) -> Variable:
    if node.is_null:
        return EMPTY
    return _BUILDERS[node.type](node.value)
