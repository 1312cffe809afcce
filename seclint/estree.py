# ESTree adapter: convert tree-sitter JavaScript trees into seclint.nodes.
# Kind names follow ESTree so rules read the way JavaScript linters read;
# parentheses and comments do not become nodes.

from __future__ import annotations

import logging
import re
from typing import Any, Iterator, Optional, Tuple

import tree_sitter
from tree_sitter import Node as TSNode

from seclint.nodes import (
    BinaryExpression,
    CallExpression,
    GenericNode,
    Identifier,
    Literal,
    MemberExpression,
    SyntaxNode,
)

logger = logging.getLogger(__name__)

# tree-sitter kind -> ESTree kind; anything missing is CamelCased
TYPE_NAMES: dict[str, str] = {
    "program": "Program",
    "expression_statement": "ExpressionStatement",
    "lexical_declaration": "VariableDeclaration",
    "variable_declaration": "VariableDeclaration",
    "variable_declarator": "VariableDeclarator",
    "function_declaration": "FunctionDeclaration",
    "generator_function_declaration": "FunctionDeclaration",
    "function": "FunctionExpression",
    "function_expression": "FunctionExpression",
    "generator_function": "FunctionExpression",
    "arrow_function": "ArrowFunctionExpression",
    "class_declaration": "ClassDeclaration",
    "class": "ClassExpression",
    "class_body": "ClassBody",
    "method_definition": "MethodDefinition",
    "statement_block": "BlockStatement",
    "if_statement": "IfStatement",
    "else_clause": "ElseClause",
    "for_statement": "ForStatement",
    "for_in_statement": "ForInStatement",
    "while_statement": "WhileStatement",
    "do_statement": "DoWhileStatement",
    "return_statement": "ReturnStatement",
    "throw_statement": "ThrowStatement",
    "try_statement": "TryStatement",
    "catch_clause": "CatchClause",
    "switch_statement": "SwitchStatement",
    "switch_case": "SwitchCase",
    "object": "ObjectExpression",
    "array": "ArrayExpression",
    "pair": "Property",
    "assignment_expression": "AssignmentExpression",
    "augmented_assignment_expression": "AssignmentExpression",
    "unary_expression": "UnaryExpression",
    "update_expression": "UpdateExpression",
    "ternary_expression": "ConditionalExpression",
    "new_expression": "NewExpression",
    "await_expression": "AwaitExpression",
    "yield_expression": "YieldExpression",
    "sequence_expression": "SequenceExpression",
    "spread_element": "SpreadElement",
    "template_string": "TemplateLiteral",
    "this": "ThisExpression",
    "super": "Super",
    "import_statement": "ImportDeclaration",
    "export_statement": "ExportNamedDeclaration",
}

IDENTIFIER_TYPES = frozenset(
    {
        "identifier",
        "property_identifier",
        "private_property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "statement_identifier",
        "undefined",
    }
)

LITERAL_TYPES = frozenset({"string", "number", "true", "false", "null", "regex"})

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

_SKIPPED_TYPES = frozenset({"comment", "html_comment"})

# \u{...}, \uXXXX, \xXX, legacy octal, CRLF continuation, or any single escaped character
_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_LINE_CONTINUATIONS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


def _node_text(source: bytes, node: TSNode) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _line_col(node: TSNode, source: bytes) -> Tuple[int, int]:
    # start_point counts bytes; report the column in characters
    row, col = node.start_point
    line_start = node.start_byte - col
    prefix = source[line_start : node.start_byte].decode("utf-8", errors="replace")
    return row + 1, len(prefix) + 1


def kind_name(ts_type: str) -> str:
    """Map a tree-sitter node type to the ESTree kind used by the rules."""
    if ts_type in TYPE_NAMES:
        return TYPE_NAMES[ts_type]
    return "".join(part.capitalize() for part in ts_type.split("_"))


def _unescape(match: re.Match) -> str:
    seq = match.group(1)
    if len(seq) > 1 and seq[0] == "u":
        digits = seq[2:-1] if seq[1] == "{" else seq[1:]
        code = int(digits, 16)
        return chr(code) if code <= 0x10FFFF else seq
    if len(seq) == 3 and seq[0] == "x":
        return chr(int(seq[1:], 16))
    if seq[0] in "01234567":
        return chr(int(seq, 8))
    if seq in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


def string_value(raw: str) -> str:
    """Return the runtime value of a quoted JavaScript string literal."""
    body = raw
    if len(raw) >= 2 and raw[0] in "'\"" and raw[-1] == raw[0]:
        body = raw[1:-1]
    value = _ESCAPE_RE.sub(_unescape, body)
    # join \uXXXX surrogate pairs; a lone surrogate becomes U+FFFD
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def number_value(raw: str) -> Any:
    """Return an int or float for a numeric literal, or None if it cannot be read."""
    text = raw.replace("_", "")
    if text.endswith("n"):  # BigInt
        text = text[:-1]
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        logger.debug("Unreadable numeric literal: %s", raw)
        return None


def _literal_value(ts_type: str, raw: str) -> Any:
    if ts_type == "string":
        return string_value(raw)
    if ts_type == "number":
        return number_value(raw)
    if ts_type == "true":
        return True
    if ts_type == "false":
        return False
    # null and regex: no string/number value
    return None


def _named_children(node: TSNode) -> Iterator[TSNode]:
    for child in node.named_children:
        if child.type in _SKIPPED_TYPES:
            continue
        if child.type == "arguments":
            # ESTree keeps call/new arguments inline on the parent
            yield from _named_children(child)
        else:
            yield child


def _convert_optional(node: Optional[TSNode], source: bytes) -> Optional[SyntaxNode]:
    if node is None:
        return None
    return convert(node, source)


def _call_arguments(node: TSNode, source: bytes) -> Tuple[SyntaxNode, ...]:
    args = node.child_by_field_name("arguments")
    if args is None:
        return ()
    if args.type != "arguments":
        # tagged template: tag`...`
        return (convert(args, source),)
    return tuple(convert(child, source) for child in _named_children(args))


def convert(node: TSNode, source: bytes) -> SyntaxNode:
    """Convert one tree-sitter node (and its subtree) into a SyntaxNode."""
    ts_type = node.type

    if ts_type == "parenthesized_expression":
        inner = next(_named_children(node), None)
        if inner is not None:
            return convert(inner, source)

    line, column = _line_col(node, source)
    span = {"start": node.start_byte, "end": node.end_byte, "line": line, "column": column}

    if ts_type in IDENTIFIER_TYPES:
        return Identifier(type="Identifier", name=_node_text(source, node), **span)

    if ts_type in LITERAL_TYPES:
        raw = _node_text(source, node)
        return Literal(type="Literal", value=_literal_value(ts_type, raw), raw=raw, **span)

    if ts_type in ("member_expression", "subscript_expression"):
        computed = ts_type == "subscript_expression"
        prop = node.child_by_field_name("index" if computed else "property")
        return MemberExpression(
            type="MemberExpression",
            object=_convert_optional(node.child_by_field_name("object"), source),
            property=_convert_optional(prop, source),
            computed=computed,
            **span,
        )

    if ts_type == "call_expression":
        return CallExpression(
            type="CallExpression",
            callee=_convert_optional(node.child_by_field_name("function"), source),
            arguments=_call_arguments(node, source),
            **span,
        )

    if ts_type == "binary_expression":
        op_node = node.child_by_field_name("operator")
        operator = _node_text(source, op_node) if op_node is not None else None
        return BinaryExpression(
            type="LogicalExpression" if operator in LOGICAL_OPERATORS else "BinaryExpression",
            operator=operator,
            left=_convert_optional(node.child_by_field_name("left"), source),
            right=_convert_optional(node.child_by_field_name("right"), source),
            **span,
        )

    return GenericNode(
        type=kind_name(ts_type),
        nodes=tuple(convert(child, source) for child in _named_children(node)),
        **span,
    )


def to_estree(tree: tree_sitter.Tree, source: bytes) -> SyntaxNode:
    """Convert a whole tree-sitter tree; the result is rooted at a Program node."""
    return convert(tree.root_node, source)
