"""
Tree walking over SyntaxNode trees.

walk() yields a subtree in pre-order (a node before its children, left to
right). TreeQuery wraps a whole tree for the rules that need to look beyond
the node they were handed, e.g. "the first node at or after this offset".

Both are iterative, so deeply nested expressions do not hit the recursion limit.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from seclint.nodes import SyntaxNode


def walk(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield node and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(tuple(current.children())))


def count_nodes(node: SyntaxNode) -> int:
    """Count node and all of its descendants."""
    return sum(1 for _ in walk(node))


class TreeQuery:
    """Read-only queries over one syntax tree, handed to rules that declare requires_tree."""

    def __init__(self, root: SyntaxNode) -> None:
        self.root = root

    def iter_nodes(self) -> Iterator[SyntaxNode]:
        """Every node of the tree in pre-order."""
        return walk(self.root)

    def find_node_after(
        self,
        offset: int,
        test: Optional[Callable[[SyntaxNode], bool]] = None,
    ) -> Optional[SyntaxNode]:
        """
        Return the first node, in pre-order, that starts at or after offset.

        Subtrees that end before offset are skipped without being entered. An
        optional test narrows which nodes qualify. Returns None when no node
        qualifies.
        """
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.end < offset:
                continue
            if node.start >= offset and (test is None or test(node)):
                return node
            stack.extend(reversed(tuple(node.children())))
        return None
