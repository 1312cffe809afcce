# Direct input field access detection: `.value` reads near document.getElementById
# that may feed unsanitized input into XSS/SQLi sinks.

from __future__ import annotations

import logging
from typing import Optional

from seclint.findings.models import Diagnostic, Severity
from seclint.nodes import SyntaxNode, name_of
from seclint.rules.base import Rule
from seclint.walker import TreeQuery, walk

logger = logging.getLogger(__name__)

DOM_LOOKUP = "getElementById"


def _is_dom_lookup(node: SyntaxNode) -> bool:
    return node.type == "MemberExpression" and name_of(getattr(node, "property", None)) == DOM_LOOKUP


class InputFieldAccessRule(Rule):
    """
    Heuristic: a `.value` read whose neighbourhood contains a raw DOM lookup.

    The neighbourhood is the subtree of the first node starting at or after
    the `.value` access (usually the access itself, or the statement that
    begins with it). Every getElementById member access in that subtree is
    reported at its own line. There is no proof the lookup and the read
    concern the same element, so a lookup stored in a variable on an earlier
    line is missed and unrelated lookups in the same subtree are reported.
    """

    id = "input-field-access"
    name = "Direct input field access"
    node_types = ("MemberExpression",)
    requires_tree = True

    def check(self, node: SyntaxNode, tree: Optional[TreeQuery] = None) -> list[Diagnostic]:
        if name_of(getattr(node, "property", None)) != "value" or tree is None:
            return []

        anchor = tree.find_node_after(node.start)
        if anchor is None:
            logger.debug("No node after offset %d; skipping .value at line %d", node.start, node.line)
            return []

        return [
            self.diagnostic(inner, "direct input field access, sanitization required", Severity.INFO)
            for inner in walk(anchor)
            if _is_dom_lookup(inner)
        ]
