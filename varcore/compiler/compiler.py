from __future__ import annotations

from typing import Any

from varcore.errors import CompileError

from .opcodes import Opcode, BINARY_OPCODES
from .chunk import Chunk
from .nodes import BinaryNode, ConstantNode


def compile_module(expr: Any) -> Chunk:
    """Compile a single expression tree into a chunk that leaves its value on
    the stack and halts.
    """
    chunk = Chunk()
    compile_expr(expr, chunk)
    chunk.emit_op(Opcode.HALT)
    return chunk


def compile_expr(expr: Any, chunk: Chunk) -> None:
    if isinstance(expr, ConstantNode):
        chunk.emit_const(expr)
        return
    if isinstance(expr, BinaryNode):
        op = BINARY_OPCODES.get(expr.op)
        if op is None:
            raise CompileError(f"Unknown operator {expr.op!r}")
        # Operands left to right, then the operator
        compile_expr(expr.left, chunk)
        compile_expr(expr.right, chunk)
        chunk.emit_op(op)
        return
    raise CompileError(f"Cannot compile {type(expr).__name__}")
