"""
Dispatch engine: route every node of a syntax tree to the rules registered for its kind.

One scan is a single pre-order pass. For each visited node the registry is
asked once for the rules of that node's kind, and each rule runs in
registration order. Diagnostics go to the reporter the moment a rule returns
them, so output follows traversal order. Kinds with no registered rules
(including kinds the adapter has never produced before) are a no-op.

Typical usage:
    from seclint.config import get_default_config
    from seclint.engine import DetectorRegistry, DispatchEngine
    from seclint.reporting.console import ConsoleReporter

    engine = DispatchEngine(DetectorRegistry(get_default_config().rules))
    engine.scan(context.root_node, ConsoleReporter(), path=context.path)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple

from seclint.context import FileContext
from seclint.nodes import SyntaxNode
from seclint.reporting.base import Reporter
from seclint.rules.base import Rule
from seclint.walker import TreeQuery

logger = logging.getLogger(__name__)


class DetectorRegistry:
    """Node kind -> rules to run for it, fixed at construction."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        by_type: dict[str, list[Rule]] = {}
        for rule in rules:
            for node_type in rule.node_types:
                by_type.setdefault(node_type, []).append(rule)
        self._by_type: Mapping[str, Tuple[Rule, ...]] = {
            node_type: tuple(registered) for node_type, registered in by_type.items()
        }

    def detectors_for(self, node_type: str) -> Tuple[Rule, ...]:
        return self._by_type.get(node_type, ())

    @property
    def node_types(self) -> Tuple[str, ...]:
        return tuple(self._by_type)


@dataclass(frozen=True)
class ScanStats:
    nodes_visited: int
    diagnostics_emitted: int


class DispatchEngine:
    """Pure routing: owns no risk logic and keeps no state between scans."""

    def __init__(self, registry: DetectorRegistry) -> None:
        self.registry = registry

    def scan(
        self,
        root: SyntaxNode,
        reporter: Reporter,
        path: Optional[Path] = None,
    ) -> ScanStats:
        """
        Visit every node under root once and emit what the rules find.

        Raises:
            SinkError: the reporter failed; diagnostics already written stay written.
        """
        tree = TreeQuery(root)
        visited = 0
        emitted = 0

        for node in tree.iter_nodes():
            visited += 1
            for rule in self.registry.detectors_for(node.type):
                found = rule.check(node, tree if rule.requires_tree else None)
                for diagnostic in found:
                    if path is not None:
                        diagnostic = diagnostic.model_copy(update={"path": path})
                    reporter.emit(diagnostic)
                    emitted += 1

        logger.debug(
            "Scan complete%s: %d nodes visited, %d diagnostic(s)",
            f" for {path}" if path is not None else "",
            visited,
            emitted,
        )
        return ScanStats(nodes_visited=visited, diagnostics_emitted=emitted)

    def scan_context(self, context: FileContext, reporter: Reporter) -> ScanStats:
        """Scan one loaded file; diagnostics carry the file's path."""
        return self.scan(context.root_node, reporter, path=context.path)
