# Unsafe type conversion detection: implicit coercion through +, == and !=

from __future__ import annotations

from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode
from seclint.rules.base import Rule
from seclint.walker import TreeQuery

LOOSE_EQUALITY_MESSAGES = {
    "==": "possible unsafe type conversion with ==, use === instead",
    "!=": "possible unsafe type conversion with !=, use !== instead",
}

PLUS_MESSAGE = "possible unsafe type conversion with + operator"


class TypeConversionRule(Rule):
    """
    Flags loose equality and `+` between operands of different syntactic kinds.

    The `+` check compares node kinds only (Literal vs Identifier vs
    CallExpression...), not runtime types: `a + b` passes, `"x" + n` does not.
    """

    id = "unsafe-type-conversion"
    name = "Unsafe type conversion"
    node_types = ("BinaryExpression",)

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        operator = getattr(node, "operator", None)

        if operator == "+":
            left = getattr(node, "left", None)
            right = getattr(node, "right", None)
            if left is None or right is None or left.type == right.type:
                return []
            return [self.diagnostic(node, PLUS_MESSAGE, Severity.INFO)]

        message = LOOSE_EQUALITY_MESSAGES.get(operator)
        if message is None:
            return []
        return [self.diagnostic(node, message, Severity.INFO)]
