"""Tree-walking evaluation of expression trees.

Mirrors what the bytecode VM does: constants are rebuilt into Variables,
operators are applied left operand first, and bool results are re-wrapped so
every intermediate is a Variable.
"""

from __future__ import annotations

from varcore.compiler.materialize import from_expression_node
from varcore.compiler.nodes import BinaryNode, ConstantNode, ExpressionNode
from varcore.conversion import from_bool
from varcore.errors import CompileError
from varcore.operators import BINARY_OPERATORS
from varcore.types import Variable


def evaluate(expr: ExpressionNode) -> Variable:
    if isinstance(expr, ConstantNode):
        return from_expression_node(expr)
    if isinstance(expr, BinaryNode):
        fn = BINARY_OPERATORS.get(expr.op)
        if fn is None:
            raise CompileError(f"Unknown operator {expr.op!r}")
        left = evaluate(expr.left)
        right = evaluate(expr.right)
        res = fn(left, right)
        return from_bool(res) if isinstance(res, bool) else res
    raise CompileError(f"Cannot evaluate {type(expr).__name__}")


class TreeWalkingBackend:
    def eval(self, expr: ExpressionNode) -> Variable:
        return evaluate(expr)
