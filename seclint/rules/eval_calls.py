# eval() detection: direct calls to eval may lead to code injection

from __future__ import annotations

from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode, name_of
from seclint.rules.base import Rule
from seclint.walker import TreeQuery


class EvalCallsRule(Rule):
    """Flags calls whose callee is the bare identifier `eval` (not window.eval, not myeval)."""

    id = "eval-call"
    name = "Dangerous eval() call"
    node_types = ("CallExpression",)

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        if name_of(getattr(node, "callee", None)) != "eval":
            return []
        return [self.diagnostic(node, "dangerous use of eval() method", Severity.WARNING)]
