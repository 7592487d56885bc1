from __future__ import annotations
from typing import Any, Literal

from varcore.compiler.materialize import to_expression_node
from varcore.compiler.nodes import BinaryNode, ConstantNode, ExpressionNode
from varcore.conversion import from_native
from varcore.types import Variable

from .backend import Backend


def constant(value: Any) -> ConstantNode:
    """Constant node for a native primitive or an existing Variable."""
    return to_expression_node(from_native(value))


def binary(op: str, left: Any, right: Any) -> BinaryNode:
    """Binary node; non-node operands are wrapped with `constant`."""
    if not isinstance(left, (ConstantNode, BinaryNode)):
        left = constant(left)
    if not isinstance(right, (ConstantNode, BinaryNode)):
        right = constant(right)
    return BinaryNode(op, left, right)


class Evaluator:
    """
    Evaluates expression trees through a pluggable backend: the tree walker
    ('interp') or the bytecode compiler and VM ('vm').
    """

    # Class-level default to avoid env-variable coupling in tests
    DefaultEngine: Literal['interp', 'vm'] = 'interp'

    def __init__(
        self,
        backend: Backend | None = None,
        *,
        engine: Literal['interp', 'vm'] | None = None,
        optimize: bool | None = None,
    ):
        if backend is None:
            eng = engine or self.DefaultEngine
            if eng == 'vm':
                from varcore.compiler.backend_impl import BytecodeBackend
                backend = BytecodeBackend(optimize=optimize)
            elif eng == 'interp':
                from varcore.evaluation.evaluator import TreeWalkingBackend
                backend = TreeWalkingBackend()
            else:
                raise ValueError(f"Unknown engine {eng!r}")
        self.backend: Backend = backend

    def eval(self, expr: ExpressionNode) -> Variable:
        return self.backend.eval(expr)


__all__ = ["Backend", "Evaluator", "constant", "binary"]
