# Tree-sitter setup and parsing: turn JavaScript source into a tree-sitter tree.

import logging
from pathlib import Path
from typing import Optional

import tree_sitter
from tree_sitter import Language
from tree_sitter_javascript import language as _js_language_capsule

logger = logging.getLogger(__name__)

# JavaScript grammar: wrap tree-sitter-javascript capsule for use with tree_sitter.Parser
_JS_LANGUAGE = Language(_js_language_capsule())


def get_js_language() -> Language:
    """Return the Tree-sitter Language object for JavaScript."""
    return _JS_LANGUAGE


def create_parser() -> tree_sitter.Parser:
    """Create and return a Tree-sitter Parser configured for JavaScript."""
    parser = tree_sitter.Parser(_JS_LANGUAGE)
    return parser


def parse_bytes(
    source: bytes,
    parser: Optional[tree_sitter.Parser] = None,
) -> tree_sitter.Tree:
    """
    Parse JavaScript source bytes into a tree-sitter tree.

    Args:
        source: UTF-8 encoded JavaScript source code.
        parser: Optional parser instance; if None, a new one is created.

    Returns:
        The parse tree. Tree-sitter recovers from syntax errors, so a tree is
        always returned; check tree.root_node.has_error.
    """
    if parser is None:
        parser = create_parser()
    tree = parser.parse(source)
    if tree.root_node.has_error:
        logger.warning(
            "Parse completed with errors: root=%s",
            tree.root_node.type,
        )
    else:
        logger.debug(
            "Parse succeeded: root=%s",
            tree.root_node.type,
        )
    return tree


def parse_file(path: Path, parser: Optional[tree_sitter.Parser] = None) -> Optional[tree_sitter.Tree]:
    """
    Parse a JavaScript file.

    Returns:
        The parse tree, or None if the file could not be read.
    """
    try:
        source = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        return None
    tree = parse_bytes(source, parser=parser)
    logger.info("Parsed file %s: success=%s", path, not tree.root_node.has_error)
    return tree
