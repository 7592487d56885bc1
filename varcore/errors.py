from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from varcore.types.category import Category


class VarcoreError(Exception):
    """ Base class for all varcore errors"""
    pass

class TypeMismatch(VarcoreError, TypeError):
    """ Raised when an operator is applied to operands of unsupported categories"""

    def __init__(self, operator: str, left: Category, right: Category):
        super().__init__(f"Operator {operator} is not defined for {left.name} and {right.name}")
        self.operator = operator
        self.left = left
        self.right = right

class DivideByZero(VarcoreError, ZeroDivisionError):
    """ Raised when the right operand of / projects to zero"""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)

class ConversionError(VarcoreError, ValueError):
    """ Raised when a native value cannot be wrapped into a Variable"""

class CompileError(VarcoreError):
    """ Raised when an expression tree cannot be compiled"""

class VMError(VarcoreError):
    """ Raised when the VM meets malformed bytecode"""
