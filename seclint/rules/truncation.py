# Truncation detection: `x | 0` silently truncates numbers to 32-bit integers

from __future__ import annotations

from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode
from seclint.rules.base import Rule
from seclint.walker import TreeQuery


def _is_zero_literal(node: Optional[SyntaxNode]) -> bool:
    # the source text must be exactly "0"; 0.0 or 0x0 do not count
    return getattr(node, "raw", None) == "0"


class TruncationRule(Rule):
    """Flags bitwise OR with a literal 0 on either side."""

    id = "bitwise-truncation"
    name = "Truncation via bitwise OR"
    node_types = ("BinaryExpression",)

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        if getattr(node, "operator", None) != "|":
            return []
        if not (_is_zero_literal(getattr(node, "left", None)) or _is_zero_literal(getattr(node, "right", None))):
            return []
        return [self.diagnostic(node, "possible truncation detected using bitwise OR", Severity.INFO)]
