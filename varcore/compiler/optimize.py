from __future__ import annotations

from typing import Any

from varcore.conversion import from_bool
from varcore.errors import CompileError, VarcoreError
from varcore.operators import apply_operator

from .chunk import Chunk, MAX_CONST_INDEX
from .materialize import from_expression_node, to_expression_node
from .nodes import ConstantNode
from .opcodes import Opcode, BINARY_SYMBOLS

# --- Decoding/assembly helpers ---

def _u16(code: bytearray, ix: int) -> int:
    return (code[ix] << 8) | code[ix + 1]


def _advance_index(code: bytearray, i: int, op: int) -> int:
    # i currently points just after the opcode byte
    if op == Opcode.PUSH_CONST:
        return i + 2
    # All others: no operands
    return i


def _decode_instructions(code: bytearray) -> list[dict[str, Any]]:
    ins: list[dict[str, Any]] = []
    i = 0
    while i < len(code):
        op = code[i]
        ni = i + 1
        next_i = _advance_index(code, ni, op)
        ins.append({"op": op, "start": i, "operands": list(code[ni:next_i])})
        i = next_i
    return ins


def _assemble_instructions(chunk: Chunk, ins: list[dict[str, Any]]) -> None:
    new_code = bytearray()
    for it in ins:
        new_code.append(int(it["op"]))
        new_code.extend(it.get("operands", []))
    chunk.code = new_code


def _const_value_from_instr(it: dict[str, Any], chunk: Chunk) -> ConstantNode | None:
    if it["op"] == Opcode.PUSH_CONST:
        ops = it["operands"]
        return chunk.constants[(ops[0] << 8) | ops[1]]
    return None


# --- Optimization passes ---

def constant_folding(chunk: Chunk) -> Chunk:
    """Fold binary operators applied to two constant pushes.

    A fold that fails (type mismatch, division by zero) is left in place so
    the failure surfaces when the chunk runs.
    """
    ins = _decode_instructions(chunk.code)
    out: list[dict[str, Any]] = []

    def make_push_const(node: ConstantNode) -> dict[str, Any]:
        idx = chunk.add_const(node)
        if idx > MAX_CONST_INDEX:
            raise CompileError(f"Too many constants in one chunk (index {idx})")
        return {"op": int(Opcode.PUSH_CONST), "start": -1, "operands": [(idx >> 8) & 0xFF, idx & 0xFF]}

    for it in ins:
        op = it["op"]
        if op in BINARY_SYMBOLS and len(out) >= 2:
            a = _const_value_from_instr(out[-2], chunk)
            b = _const_value_from_instr(out[-1], chunk)
            if a is not None and b is not None:
                try:
                    res = apply_operator(BINARY_SYMBOLS[op], from_expression_node(a), from_expression_node(b))
                except VarcoreError:
                    pass
                else:
                    if isinstance(res, bool):
                        res = from_bool(res)
                    out.pop(); out.pop()
                    out.append(make_push_const(to_expression_node(res)))
                    continue
        out.append(it)
    _assemble_instructions(chunk, out)
    _drop_unused_constants(chunk)
    return chunk


def peephole_optimize(chunk: Chunk) -> Chunk:
    """Apply small local rewrites.
    Patterns:
    - NOP => removed
    - const followed by POP => both removed
    """
    ins = _decode_instructions(chunk.code)
    out: list[dict[str, Any]] = []
    i = 0
    n = len(ins)
    while i < n:
        it = ins[i]
        op = it["op"]
        if op == Opcode.NOP:
            i += 1
            continue
        if i + 1 < n and op == Opcode.PUSH_CONST and ins[i + 1]["op"] == Opcode.POP:
            i += 2
            continue
        out.append(it)
        i += 1
    _assemble_instructions(chunk, out)
    return chunk


def _drop_unused_constants(chunk: Chunk) -> None:
    ins = _decode_instructions(chunk.code)
    used: dict[int, int] = {}
    constants: list[ConstantNode] = []
    for it in ins:
        if it["op"] == Opcode.PUSH_CONST:
            old = _u16(bytearray(it["operands"]), 0)
            if old not in used:
                used[old] = len(constants)
                constants.append(chunk.constants[old])
            new = used[old]
            it["operands"] = [(new >> 8) & 0xFF, new & 0xFF]
    chunk.constants = constants
    _assemble_instructions(chunk, ins)


def optimize_chunk(chunk: Chunk) -> Chunk:
    """
    Top-level optimizer orchestrator.

    Note: The caller is responsible for gating via VARCORE_OPT; this function
    simply chains optimization passes.
    """
    chunk = constant_folding(chunk)
    chunk = peephole_optimize(chunk)
    return chunk
