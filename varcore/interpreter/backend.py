from __future__ import annotations
from typing import Protocol

from varcore.compiler.nodes import ExpressionNode
from varcore.types import Variable


class Backend(Protocol):
    def eval(self, expr: ExpressionNode) -> Variable: ...
