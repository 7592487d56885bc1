from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from varcore.compiler.nodes import ConstantNode
from varcore.compiler.opcodes import Opcode
from varcore.errors import CompileError


# PUSH_CONST carries a u16 index
MAX_CONST_INDEX = 0xFFFF


def _const_key(node: ConstantNode) -> tuple:
    # repr keeps -0.0 apart from 0.0 and lets NaN match itself
    return node.type, repr(node.value)


@dataclass
class Chunk:
    """A chunk of bytecode with a constants table.

    Operands are fixed size; PUSH_CONST carries a big-endian u16 index.
    """

    code: bytearray = field(default_factory=bytearray)
    constants: List[ConstantNode] = field(default_factory=list)

    def add_const(self, value: ConstantNode) -> int:
        key = _const_key(value)
        for idx, existing in enumerate(self.constants):
            if _const_key(existing) == key:
                return idx
        self.constants.append(value)
        return len(self.constants) - 1

    # --- Emit helpers ---
    def emit_op(self, op: Opcode) -> int:
        self.code.append(int(op))
        return len(self.code) - 1

    def emit_u16(self, v: int) -> None:
        self.code.extend(((v >> 8) & 0xFF, v & 0xFF))

    # --- high-level convenience ---
    def emit_const(self, value: ConstantNode) -> None:
        idx = self.add_const(value)
        if idx > MAX_CONST_INDEX:
            raise CompileError(f"Too many constants in one chunk (index {idx})")
        self.emit_op(Opcode.PUSH_CONST)
        self.emit_u16(idx)
