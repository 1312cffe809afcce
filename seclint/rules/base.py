# Rule interface (abstract base class): the contract every detector implements.
# Concrete rules (eval_calls, console_logs, etc.) subclass Rule and implement check().

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode
from seclint.walker import TreeQuery


class Rule(ABC):
    """
    Abstract base class for all detectors.

    Subclasses must define:
    - id: str — unique rule identifier (e.g. "eval-call")
    - name: str — human-readable rule name (e.g. "Dangerous eval() call")
    - node_types: tuple of ESTree kinds the rule is registered for
    - check(node, tree) -> list[Diagnostic]

    The engine calls check() once for every visited node whose kind is in
    node_types. Rules keep no state between calls and must not assume a node
    has all of its fields: a rule that cannot find what it looks for returns [].
    """

    id: ClassVar[str]
    name: ClassVar[str]
    node_types: ClassVar[Tuple[str, ...]] = ()
    # When True the engine passes a TreeQuery over the whole tree as `tree`
    requires_tree: ClassVar[bool] = False

    @abstractmethod
    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        """
        Inspect one node and return any diagnostics.

        Args:
            node: The visited node; its type is one of node_types.
            tree: Whole-tree queries, only provided when requires_tree is set.

        Returns:
            Diagnostics in the order they were found; empty if nothing matched.
        """
        ...

    def diagnostic(self, node: SyntaxNode, message: str, severity: Severity) -> Diagnostic:
        """Build a diagnostic located at node."""
        return Diagnostic(
            rule_id=self.id,
            severity=severity,
            message=message,
            line=node.line,
            column=node.column,
        )
