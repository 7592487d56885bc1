from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union


class NativeType(Enum):
    INT32 = auto()
    INT64 = auto()
    BOOL = auto()
    DOUBLE = auto()
    STRING = auto()

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]


_PYTHON_TYPES = {
    NativeType.INT32: int,
    NativeType.INT64: int,
    NativeType.BOOL: bool,
    NativeType.DOUBLE: float,
    NativeType.STRING: str,
}


@dataclass(frozen=True)
class ConstantNode:
    """A typed leaf of an expression tree.

    `value` is None only for the null-string constant.
    """

    type: NativeType
    value: Any

    @property
    def is_null(self) -> bool:
        return self.value is None

    def __repr__(self) -> str:
        return f"Constant({self.value!r}: {self.type.name})"


@dataclass(frozen=True)
class BinaryNode:
    op: str
    left: ExpressionNode
    right: ExpressionNode


ExpressionNode = Union[ConstantNode, BinaryNode]
