# Per-file analysis context: file path, source bytes, and the ESTree-shaped tree.
# Handles reading/parsing JavaScript files, error handling for unreadable/malformed
# files, and logging of node/function counts so trees are ready for the engine.

import logging
from pathlib import Path
from typing import Optional

from tree_sitter import Parser

from seclint.estree import to_estree
from seclint.nodes import SyntaxNode
from seclint.parser import create_parser, parse_bytes
from seclint.walker import walk

logger = logging.getLogger(__name__)

FUNCTION_TYPES = frozenset(
    {
        "FunctionDeclaration",
        "FunctionExpression",
        "ArrowFunctionExpression",
        "MethodDefinition",
    }
)


def count_tree_stats(root: SyntaxNode) -> tuple[int, int]:
    """
    Return (total node count, function count) for the tree.

    Useful for logging how much was parsed (nodes and functions).
    """
    nodes = 0
    functions = 0
    for node in walk(root):
        nodes += 1
        if node.type in FUNCTION_TYPES:
            functions += 1
    return nodes, functions


class FileContext:
    """
    Per-file state for analysis: path, raw source bytes, and syntax tree.

    The tree is the converted ESTree-shaped root (a Program node), not the
    tree-sitter tree; rules never see tree-sitter nodes.
    """

    def __init__(
        self,
        path: Path,
        source: bytes,
        tree: SyntaxNode,
        *,
        has_parse_errors: bool = False,
    ) -> None:
        self.path = path
        self.source = source
        self.tree = tree
        self.has_parse_errors = has_parse_errors

    @property
    def root_node(self) -> SyntaxNode:
        """Convenience access to the tree root."""
        return self.tree


def get_source_span(context: FileContext, node: SyntaxNode) -> str:
    """
    Return the substring of context.source for the given node's byte range.

    Decodes with errors="replace" so bad UTF-8 does not crash.
    """
    return context.source[node.start : node.end].decode("utf-8", errors="replace")


def context_from_bytes(
    path: Path,
    source: bytes,
    parser: Optional[Parser] = None,
) -> FileContext:
    """Parse already-loaded source into a FileContext."""
    ts_tree = parse_bytes(source, parser=parser)
    has_errors = ts_tree.root_node.has_error
    if has_errors:
        logger.warning("File %s parsed with syntax errors; tree may be incomplete", path)

    tree = to_estree(ts_tree, source)
    node_count, func_count = count_tree_stats(tree)
    logger.info(
        "Parsed %s: %d nodes, %d function(s)%s",
        path,
        node_count,
        func_count,
        " (with parse errors)" if has_errors else "",
    )

    return FileContext(
        path=path,
        source=source,
        tree=tree,
        has_parse_errors=has_errors,
    )


def create_context(
    path: Path,
    parser: Optional[Parser] = None,
) -> Optional[FileContext]:
    """
    Read a JavaScript file and parse it into a FileContext.

    - Unreadable file (permission, missing): returns None and logs error.
    - Malformed JavaScript: still returns a FileContext with the recovered
      tree and has_parse_errors=True; logs a warning.
    - Success: returns FileContext and logs node count and function count.
    """
    if parser is None:
        parser = create_parser()

    try:
        source = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        return None

    return context_from_bytes(path, source, parser=parser)


def load_contexts(
    paths: list[Path],
    parser: Optional[Parser] = None,
) -> list[FileContext]:
    """
    Read and parse multiple files into FileContexts.

    Unreadable or missing files are skipped (logged). Order matches input
    order; failed files are omitted.
    """
    if parser is None:
        parser = create_parser()

    contexts: list[FileContext] = []
    for path in paths:
        ctx = create_context(path, parser=parser)
        if ctx is not None:
            contexts.append(ctx)
    return contexts
