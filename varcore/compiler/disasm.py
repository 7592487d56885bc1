from __future__ import annotations

from .chunk import Chunk
from .opcodes import Opcode


def disassemble_chunk(chunk: Chunk) -> str:
    code = chunk.code
    consts = chunk.constants
    out = []
    i = 0
    def u16(ix):
        return (code[ix] << 8) | code[ix+1]
    while i < len(code):
        op = code[i]
        try:
            opname = Opcode(op).name
        except ValueError:
            opname = f"OP_{op:02X}"
        line = f"{i:04d}: {opname}"
        i += 1
        if op == Opcode.PUSH_CONST:
            val = u16(i); i += 2
            line += f" {val}"
        out.append(line)
    # Append constants info
    out.append("-- constants --")
    for idx, c in enumerate(consts):
        out.append(f"[{idx}] {c!r}")
    return "\n".join(out)
