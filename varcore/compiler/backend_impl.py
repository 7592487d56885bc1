from __future__ import annotations

from varcore import config
from varcore.types import Variable

from .compiler import compile_module
from .disasm import disassemble_chunk
from .nodes import ExpressionNode
from .optimize import optimize_chunk
from .vm import run_chunk


class BytecodeBackend:
    """
    Compiler backend: compiles the expression tree to bytecode and runs it on the VM.
    """

    def __init__(self, optimize: bool | None = None):
        # None defers to VARCORE_OPT at evaluation time
        self.optimize = optimize

    def eval(self, expr: ExpressionNode) -> Variable:
        chunk = compile_module(expr)
        optimize = config.optimize_enabled() if self.optimize is None else self.optimize
        if optimize:
            chunk = optimize_chunk(chunk)
        if config.disasm_enabled():
            print("=== DISASM ===")
            print(disassemble_chunk(chunk))
            print("=== END DISASM ===")
        return run_chunk(chunk)
