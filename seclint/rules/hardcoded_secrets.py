# Hardcoded secrets detection: API keys, tokens, passwords and connection strings in string literals

from __future__ import annotations

from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode
from seclint.patterns import SecretMatcher, get_default_matcher
from seclint.rules.base import Rule
from seclint.walker import TreeQuery


class HardcodedSecretsRule(Rule):
    """
    Runs every string literal through the secret patterns and reports each match.

    Number, boolean, null and regex literals are skipped. The message carries
    only a truncated preview of the match.
    """

    id = "hardcoded-secret"
    name = "Hardcoded secret"
    node_types = ("Literal",)

    def __init__(self, matcher: SecretMatcher | None = None) -> None:
        self.matcher = matcher if matcher is not None else get_default_matcher()

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        value = getattr(node, "value", None)
        if not isinstance(value, str):
            return []
        return [
            self.diagnostic(node, f"found hardcoded secret - {match.preview}", Severity.WARNING)
            for match in self.matcher.find(value)
        ]
