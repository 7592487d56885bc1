from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    # Stack and constants
    NOP = 0x00
    PUSH_CONST = 0x05  # u16 index
    POP = 0x07

    # Arithmetic / comparison
    ADD = 0x60
    SUB = 0x61
    MUL = 0x62
    DIV = 0x63
    MOD = 0x64
    LT = 0x65
    LE = 0x66
    GT = 0x67
    GE = 0x68
    EQ = 0x69
    NEQ = 0x6A
    AND = 0x6C
    OR = 0x6D

    # Misc
    HALT = 0xFF


# Operator symbol carried out by each binary opcode
BINARY_SYMBOLS: dict[Opcode, str] = {
    Opcode.ADD: "+",
    Opcode.SUB: "-",
    Opcode.MUL: "*",
    Opcode.DIV: "/",
    Opcode.MOD: "%",
    Opcode.LT: "<",
    Opcode.LE: "<=",
    Opcode.GT: ">",
    Opcode.GE: ">=",
    Opcode.EQ: "==",
    Opcode.NEQ: "!=",
    Opcode.AND: "&",
    Opcode.OR: "|",
}

BINARY_OPCODES: dict[str, Opcode] = {sym: op for op, sym in BINARY_SYMBOLS.items()}
