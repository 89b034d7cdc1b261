"""Build the node model from an ESTree document.

Accepts the output of ``@typescript-eslint/typescript-estree``'s ``parse``
(with ``range: true``) either as a dict or as a JSON string. Only the node
types the rule distinguishes are mapped to typed nodes; the rest keep their
ESTree type name on an ``OpaqueNode``.

Usage:
    tree = from_estree(json.loads(ast_json), source_text)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .nodes import (
    ArrayPattern,
    ArrowFunctionExpression,
    AssignmentExpression,
    AssignmentPattern,
    CallExpression,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    Literal,
    MemberExpression,
    MethodDefinition,
    Node,
    ObjectPattern,
    OpaqueNode,
    Property,
    RestElement,
    TSParameterProperty,
    VariableDeclarator,
)
from .tree import SourceText, SyntaxTree

logger = get_logger(__name__)

# Keys that never lead to child nodes (or lead back up the tree).
_SKIP_KEYS = frozenset({"type", "parent", "loc", "range", "tokens", "comments"})

_FUNCTIONS = {
    "FunctionDeclaration": FunctionDeclaration,
    "FunctionExpression": FunctionExpression,
    "ArrowFunctionExpression": ArrowFunctionExpression,
}


def from_estree(
    document: Union[dict, str], source: Union[str, SourceText], path: str = "<estree>"
) -> SyntaxTree:
    """Convert an ESTree document into a SyntaxTree.

    Args:
        document: Root ESTree node (usually ``Program``) or its JSON encoding
        source: The source text the document was parsed from
        path: Label used in error messages

    Raises:
        ParsingError: If the document isn't valid JSON or a node lacks a range
    """
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            raise ParsingError(Path(path), "estree", f"invalid JSON: {e}")
    if not isinstance(document, dict) or "type" not in document:
        raise ParsingError(Path(path), "estree", "document root is not an ESTree node")

    text = source if isinstance(source, SourceText) else SourceText(source)
    root = _EstreeConverter(path).convert(document)
    return SyntaxTree(root, text)


class _EstreeConverter:
    def __init__(self, path: str) -> None:
        self._path = path

    def convert(self, raw: dict) -> Node:
        node_type = raw["type"]
        span = self._span(raw)

        if node_type == "Identifier":
            return Identifier(
                span,
                name=raw.get("name", ""),
                type_annotation=self._annotation(raw),
                optional=bool(raw.get("optional")),
                decorators=self._children(raw, "decorators"),
            )
        if node_type == "Literal":
            return self._literal(raw, span)
        if node_type == "AssignmentPattern":
            return AssignmentPattern(
                span,
                left=self._child(raw, "left"),
                right=self._child(raw, "right"),
                decorators=self._children(raw, "decorators"),
            )
        if node_type == "RestElement":
            return RestElement(
                span,
                argument=self._child(raw, "argument"),
                type_annotation=self._annotation(raw),
                decorators=self._children(raw, "decorators"),
            )
        if node_type == "ObjectPattern":
            return ObjectPattern(
                span,
                properties=self._children(raw, "properties"),
                type_annotation=self._annotation(raw),
                decorators=self._children(raw, "decorators"),
            )
        if node_type == "ArrayPattern":
            return ArrayPattern(
                span,
                elements=self._children(raw, "elements"),
                type_annotation=self._annotation(raw),
                decorators=self._children(raw, "decorators"),
            )
        if node_type == "TSParameterProperty":
            return TSParameterProperty(
                span,
                parameter=self._child(raw, "parameter"),
                accessibility=raw.get("accessibility"),
                readonly=bool(raw.get("readonly")),
                override=bool(raw.get("override")),
                decorators=self._children(raw, "decorators"),
            )
        if node_type in _FUNCTIONS:
            return _FUNCTIONS[node_type](
                span,
                params=self._children(raw, "params"),
                id=self._optional_child(raw, "id"),
                body=self._optional_child(raw, "body"),
                return_type=self._annotation(raw, "returnType"),
            )
        if node_type == "CallExpression":
            return CallExpression(
                span, callee=self._child(raw, "callee"), arguments=self._children(raw, "arguments")
            )
        if node_type == "MemberExpression":
            return MemberExpression(
                span,
                object=self._child(raw, "object"),
                property=self._child(raw, "property"),
                computed=bool(raw.get("computed")),
            )
        if node_type == "Property":
            return Property(
                span,
                key=self._child(raw, "key"),
                value=self._child(raw, "value"),
                method=bool(raw.get("method")),
                shorthand=bool(raw.get("shorthand")),
                kind=raw.get("kind", "init"),
            )
        if node_type == "MethodDefinition":
            return MethodDefinition(
                span,
                key=self._child(raw, "key"),
                value=self._child(raw, "value"),
                kind=raw.get("kind", "method"),
                static=bool(raw.get("static")),
            )
        if node_type == "AssignmentExpression":
            return AssignmentExpression(
                span,
                left=self._child(raw, "left"),
                right=self._child(raw, "right"),
                operator=raw.get("operator", "="),
            )
        if node_type == "VariableDeclarator":
            return VariableDeclarator(
                span, id=self._child(raw, "id"), init=self._optional_child(raw, "init")
            )

        return OpaqueNode(span, node_type=node_type, body=self._generic_children(raw))

    # -- helpers --

    def _span(self, raw: dict) -> tuple[int, int]:
        span = raw.get("range")
        if not isinstance(span, (list, tuple)) or len(span) != 2:
            raise ParsingError(
                Path(self._path), "estree", f"{raw.get('type')} node has no range (parse with range: true)"
            )
        return int(span[0]), int(span[1])

    def _child(self, raw: dict, key: str) -> Node:
        value = raw.get(key)
        if not _is_node(value):
            raise ParsingError(
                Path(self._path), "estree", f"{raw['type']}.{key} is missing"
            )
        return self.convert(value)

    def _optional_child(self, raw: dict, key: str) -> Optional[Node]:
        value = raw.get(key)
        return self.convert(value) if _is_node(value) else None

    def _children(self, raw: dict, key: str) -> tuple[Node, ...]:
        # Array holes (``[, b]``) are null entries and are dropped.
        return tuple(self.convert(item) for item in raw.get(key) or () if _is_node(item))

    def _annotation(self, raw: dict, key: str = "typeAnnotation") -> Optional[Node]:
        # TSTypeAnnotation wraps the type; the rule wants the type itself.
        wrapper = raw.get(key)
        if not _is_node(wrapper):
            return None
        inner = wrapper.get("typeAnnotation")
        return self.convert(inner if _is_node(inner) else wrapper)

    def _literal(self, raw: dict, span: tuple[int, int]) -> Literal:
        value = raw.get("value")
        if "regex" in raw:
            kind = "regex"
        elif "bigint" in raw:
            kind = "bigint"
        elif isinstance(value, bool):
            kind = "boolean"
        elif isinstance(value, (int, float)):
            kind = "number"
        elif isinstance(value, str):
            kind = "string"
        else:
            kind = "null"
        return Literal(span, kind=kind, raw=raw.get("raw", ""), value=value)

    def _generic_children(self, raw: dict) -> tuple[Node, ...]:
        found: list[Node] = []
        for key, value in raw.items():
            if key in _SKIP_KEYS:
                continue
            if _is_node(value):
                found.append(self.convert(value))
            elif isinstance(value, list):
                found.extend(self.convert(item) for item in value if _is_node(item))
        return tuple(sorted(found, key=lambda n: n.start))


def _is_node(value: Any) -> bool:
    return isinstance(value, dict) and "type" in value
