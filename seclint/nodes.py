# Syntax model: ESTree-shaped nodes that rules match against.
# Built from tree-sitter trees by seclint.estree; read-only once built.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple


@dataclass(frozen=True)
class SyntaxNode:
    """
    Common shape of every node: ESTree kind name plus its source span.

    start/end are byte offsets into the file; line and column are 1-based.
    Variant fields may be None when the parser recovered from an error, so
    rules must check a field before dereferencing it.
    """

    type: str
    start: int
    end: int
    line: int
    column: int

    def children(self) -> Iterator[SyntaxNode]:
        """Yield direct children in source order."""
        return iter(())


@dataclass(frozen=True)
class Identifier(SyntaxNode):
    name: Optional[str] = None


@dataclass(frozen=True)
class Literal(SyntaxNode):
    """String, number, boolean, null or regex literal. raw is the source text."""

    value: Any = None
    raw: Optional[str] = None


@dataclass(frozen=True)
class MemberExpression(SyntaxNode):
    object: Optional[SyntaxNode] = None
    property: Optional[SyntaxNode] = None
    computed: bool = False

    def children(self) -> Iterator[SyntaxNode]:
        for child in (self.object, self.property):
            if child is not None:
                yield child


@dataclass(frozen=True)
class CallExpression(SyntaxNode):
    callee: Optional[SyntaxNode] = None
    arguments: Tuple[SyntaxNode, ...] = ()

    def children(self) -> Iterator[SyntaxNode]:
        if self.callee is not None:
            yield self.callee
        yield from self.arguments


@dataclass(frozen=True)
class BinaryExpression(SyntaxNode):
    """Arithmetic, comparison and bitwise operators (logical ones are LogicalExpression)."""

    operator: Optional[str] = None
    left: Optional[SyntaxNode] = None
    right: Optional[SyntaxNode] = None

    def children(self) -> Iterator[SyntaxNode]:
        for child in (self.left, self.right):
            if child is not None:
                yield child


@dataclass(frozen=True)
class GenericNode(SyntaxNode):
    """Any other kind of node; only its children matter to the rules."""

    nodes: Tuple[SyntaxNode, ...] = ()

    def children(self) -> Iterator[SyntaxNode]:
        return iter(self.nodes)


def name_of(node: Optional[SyntaxNode]) -> Optional[str]:
    """Return the identifier name of node, or None for anything that is not an Identifier."""
    if isinstance(node, Identifier):
        return node.name
    return None
