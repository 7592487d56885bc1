from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from varcore.conversion import from_bool
from varcore.errors import VMError
from varcore.operators import apply_operator
from varcore.types import EMPTY, Variable

from .opcodes import Opcode, BINARY_SYMBOLS
from .chunk import Chunk
from .materialize import from_expression_node


@dataclass
class Frame:
    chunk: Chunk
    ip: int


class VM:
    class RunSignal:
        NORMAL = 0
        RETURN = 1

    def __init__(self):
        self.stack: List[Variable] = []
        self.frames: List[Frame] = []
        # Opcode dispatch table
        self._dispatch: dict[int, Callable[[Frame, int], Tuple[int, Any | None]]] = {}
        self._init_dispatch()

    def _init_dispatch(self) -> None:
        d = self._dispatch
        # Stack and constants
        d[Opcode.NOP] = self.op_nop
        d[Opcode.PUSH_CONST] = self.op_push_const
        d[Opcode.POP] = self.op_pop
        # Arithmetic / comparison / logic share one handler
        for op in BINARY_SYMBOLS:
            d[op] = self.op_binary
        # Misc
        d[Opcode.HALT] = self.op_halt

    # --- Per-op handlers ---
    def op_nop(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        return VM.RunSignal.NORMAL, None

    def op_push_const(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        code = frame.chunk.code
        consts = frame.chunk.constants
        if frame.ip + 1 >= len(code):
            raise VMError("PUSH_CONST is missing its operand")
        idx = (code[frame.ip] << 8) | code[frame.ip + 1]
        frame.ip += 2
        if idx >= len(consts):
            raise VMError(f"Constant index {idx} out of range")
        self.push(from_expression_node(consts[idx]))
        return VM.RunSignal.NORMAL, None

    def op_pop(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        self.pop()
        return VM.RunSignal.NORMAL, None

    def op_binary(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        b = self.pop()
        a = self.pop()
        res = apply_operator(BINARY_SYMBOLS[Opcode(op)], a, b)
        # Comparisons and logic yield bool; keep the stack uniform
        self.push(from_bool(res) if isinstance(res, bool) else res)
        return VM.RunSignal.NORMAL, None

    def op_halt(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        return VM.RunSignal.RETURN, (self.pop() if self.stack else EMPTY)

    def push(self, v: Variable) -> None:
        self.stack.append(v)

    def pop(self) -> Variable:
        if not self.stack:
            raise VMError("Stack underflow")
        return self.stack.pop()

    def peek(self, n: int = 0) -> Variable:
        return self.stack[-1 - n]

    # --- Execution ---
    def run(self, chunk: Chunk) -> Variable:
        self.frames.append(Frame(chunk=chunk, ip=0))

        while True:
            frame = self.frames[-1]
            code = frame.chunk.code
            ip = frame.ip
            if ip >= len(code):
                # Implicit HALT at chunk end
                return self.pop() if self.stack else EMPTY
            op = code[ip]
            frame.ip += 1

            handler = self._dispatch.get(op)
            if handler is None:
                raise VMError(f"Unknown opcode: {op}")
            signal, value = handler(frame, op)
            if signal == VM.RunSignal.RETURN:
                return value


def run_chunk(chunk: Chunk) -> Variable:
    vm = VM()
    return vm.run(chunk)
