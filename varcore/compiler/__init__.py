from __future__ import annotations

# Public surface for the compiler package
from .opcodes import Opcode
from .nodes import NativeType, ConstantNode, BinaryNode, ExpressionNode
from .materialize import to_expression_node, from_expression_node
from .chunk import Chunk
from .compiler import compile_module, compile_expr
from .optimize import optimize_chunk
from .disasm import disassemble_chunk
from .vm import VM, run_chunk

__all__ = [
    "Opcode",
    "NativeType",
    "ConstantNode",
    "BinaryNode",
    "ExpressionNode",
    "to_expression_node",
    "from_expression_node",
    "Chunk",
    "compile_module",
    "compile_expr",
    "optimize_chunk",
    "disassemble_chunk",
    "VM",
    "run_chunk",
]
