# Console logging detection: console.log()/console.debug() left behind after debugging

from __future__ import annotations

from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode, name_of
from seclint.rules.base import Rule
from seclint.walker import TreeQuery

LOGGING_METHODS = frozenset({"log", "debug"})


class ConsoleLogsRule(Rule):
    """Flags console.log / console.debug member accesses; console.error and friends are fine."""

    id = "console-log"
    name = "Console logging"
    node_types = ("MemberExpression",)

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        if name_of(getattr(node, "object", None)) != "console":
            return []
        if name_of(getattr(node, "property", None)) not in LOGGING_METHODS:
            return []
        return [self.diagnostic(node, "information being logged to console", Severity.INFO)]
