"""Normalizer: converts tree-sitter parse trees to the ESTree-shaped node model.

Handles the differences between the concrete tree-sitter grammars
(typescript, tsx, javascript) and the node model the rule reads:

- parenthesized expressions are unwrapped, as ESTree does
- TypeScript parameters (``required_parameter``/``optional_parameter``)
  become Identifier / AssignmentPattern / RestElement / patterns, wrapped in
  TSParameterProperty when they carry a modifier
- parameter decorators are kept on the outermost parameter node and included
  in its range
- object-literal methods become ``Property(method=True)`` and class methods
  ``MethodDefinition``, both around a FunctionExpression
- byte offsets become character offsets
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

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
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)

_FUNCTION_DECLARATIONS = ("function_declaration", "generator_function_declaration")
_FUNCTION_EXPRESSIONS = ("function_expression", "function", "generator_function")
_TS_PARAMETERS = ("required_parameter", "optional_parameter")
_SKIPPED = ("comment", "decorator")
_DECORATABLE = (Identifier, AssignmentPattern, RestElement, ObjectPattern, ArrayPattern)
_LITERAL_KINDS = {
    "string": "string",
    "number": "number",
    "true": "boolean",
    "false": "boolean",
    "null": "null",
    "regex": "regex",
}


class TreeSitterNormalizer:
    """Builds SyntaxTrees from source text via tree-sitter.

    Usage:
        normalizer = TreeSitterNormalizer()
        tree = normalizer.parse(source, "typescript")
    """

    def __init__(self, parser: Optional[TreeSitterParser] = None) -> None:
        self._parser = parser or TreeSitterParser()

    def parse(self, source: str, language: str, path: str = "<source>") -> SyntaxTree:
        """Parse ``source`` and return its SyntaxTree.

        Raises:
            UnsupportedLanguageError: If there's no grammar for ``language``
            ParsingError: If the source has syntax errors or can't be converted
        """
        code = source.encode("utf-8")
        ts_tree = self._parser.parse(code, language)
        root = ts_tree.root_node

        if root.has_error:
            error = _first_error(root)
            line = error.start_point[0] + 1 if error is not None else 0
            raise ParsingError(Path(path), language, f"syntax error near line {line}")

        converter = _Converter(code, source)
        try:
            converted = converter.convert(root)
        except RecursionError:
            raise ParsingError(Path(path), language, "syntax tree is nested too deeply")
        logger.debug(f"Built syntax tree for {path} ({language})")
        return SyntaxTree(converted, SourceText(source))


def _first_error(node: Any) -> Any:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class _Converter:
    def __init__(self, code: bytes, source: str) -> None:
        self._code = code
        self._offsets: Optional[list[int]] = None
        if len(code) != len(source):
            # Multi-byte characters present: map every byte offset to a char offset
            offsets: list[int] = []
            for index, ch in enumerate(source):
                offsets.extend([index] * len(ch.encode("utf-8")))
            offsets.append(len(source))
            self._offsets = offsets

    # -- positions and text --

    def _char(self, byte_offset: int) -> int:
        if self._offsets is None:
            return byte_offset
        return self._offsets[byte_offset]

    def _span(self, node: Any) -> tuple[int, int]:
        return self._char(node.start_byte), self._char(node.end_byte)

    def _text(self, node: Any) -> str:
        return self._code[node.start_byte : node.end_byte].decode("utf-8")

    def _named(self, node: Any) -> list[Any]:
        return [c for c in node.named_children if c.type not in _SKIPPED]

    # -- dispatch --

    def convert(self, node: Any) -> Node:
        kind = node.type

        if kind == "parenthesized_expression":
            inner = self._named(node)
            if inner:
                return self.convert(inner[0])
        if kind in _FUNCTION_DECLARATIONS:
            return FunctionDeclaration(self._span(node), **self._function_parts(node))
        if kind in _FUNCTION_EXPRESSIONS:
            return FunctionExpression(self._span(node), **self._function_parts(node))
        if kind == "arrow_function":
            return self._arrow(node)
        if kind == "method_definition":
            return self._method(node)
        if kind in _TS_PARAMETERS:
            return self._ts_parameter(node)
        if kind in ("identifier", "property_identifier", "shorthand_property_identifier"):
            return Identifier(self._span(node), name=self._text(node))
        if kind == "assignment_pattern":
            return AssignmentPattern(
                self._span(node),
                left=self.convert(node.child_by_field_name("left")),
                right=self.convert(node.child_by_field_name("right")),
            )
        if kind == "rest_pattern":
            return RestElement(self._span(node), argument=self._rest_argument(node))
        if kind == "object_pattern":
            return ObjectPattern(self._span(node), properties=self._convert_all(node))
        if kind == "array_pattern":
            return ArrayPattern(self._span(node), elements=self._convert_all(node))
        if kind == "call_expression":
            call = self._call(node)
            if call is not None:
                return call
        if kind == "member_expression":
            return MemberExpression(
                self._span(node),
                object=self.convert(node.child_by_field_name("object")),
                property=self.convert(node.child_by_field_name("property")),
            )
        if kind == "subscript_expression":
            return MemberExpression(
                self._span(node),
                object=self.convert(node.child_by_field_name("object")),
                property=self.convert(node.child_by_field_name("index")),
                computed=True,
            )
        if kind == "pair":
            return Property(
                self._span(node),
                key=self.convert(node.child_by_field_name("key")),
                value=self.convert(node.child_by_field_name("value")),
            )
        if kind == "shorthand_property":
            return self._shorthand_property(node)
        if kind in ("assignment_expression", "augmented_assignment_expression"):
            operator = node.child_by_field_name("operator")
            return AssignmentExpression(
                self._span(node),
                left=self.convert(node.child_by_field_name("left")),
                right=self.convert(node.child_by_field_name("right")),
                operator=self._text(operator) if operator is not None else "=",
            )
        if kind == "variable_declarator":
            return self._declarator(node)
        if kind in _LITERAL_KINDS:
            return self._literal(node)

        return OpaqueNode(self._span(node), node_type=kind, body=self._convert_all(node))

    def _convert_all(self, node: Any) -> tuple[Node, ...]:
        return tuple(self.convert(c) for c in self._named(node))

    # -- functions --

    def _function_parts(self, node: Any) -> dict:
        name = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        return {
            "params": self._params(node.child_by_field_name("parameters")),
            "id": self.convert(name) if name is not None else None,
            "body": self.convert(body) if body is not None else None,
            "return_type": self._annotated_type(node.child_by_field_name("return_type")),
        }

    def _arrow(self, node: Any) -> ArrowFunctionExpression:
        parts = self._function_parts(node)
        bare = node.child_by_field_name("parameter")
        if bare is not None:
            parts["params"] = (self.convert(bare),)
        return ArrowFunctionExpression(self._span(node), **parts)

    def _method(self, node: Any) -> Node:
        parts = self._function_parts(node)
        parameters = node.child_by_field_name("parameters")
        start = parameters.start_byte if parameters is not None else node.start_byte
        value = FunctionExpression((self._char(start), self._char(node.end_byte)), **parts)
        key = node.child_by_field_name("name")
        key_node = self.convert(key)

        accessor = next(
            (c.type for c in node.children if not c.is_named and c.type in ("get", "set")),
            None,
        )
        parent = node.parent
        if parent is not None and parent.type == "object":
            return Property(
                self._span(node),
                key=key_node,
                value=value,
                method=accessor is None,
                kind=accessor or "init",
            )

        if accessor is not None:
            kind = accessor
        elif self._text(key) == "constructor":
            kind = "constructor"
        else:
            kind = "method"
        static = any(not c.is_named and c.type == "static" for c in node.children)
        return MethodDefinition(self._span(node), key=key_node, value=value, kind=kind, static=static)

    def _params(self, parameters: Any) -> tuple[Node, ...]:
        if parameters is None:
            return ()
        return tuple(self.convert(c) for c in self._named(parameters))

    # -- parameters --

    def _ts_parameter(self, node: Any) -> Node:
        pattern = node.child_by_field_name("pattern")
        type_node = node.child_by_field_name("type")
        value = node.child_by_field_name("value")
        annotation = self._annotated_type(type_node)

        accessibility = None
        readonly = False
        override = False
        start_byte = None
        binding_end = pattern.end_byte
        decorators = []
        for child in node.children:
            if child.type == "decorator":
                decorators.append(self.convert(child))
                continue
            if start_byte is None:
                start_byte = child.start_byte
            if child.type == "accessibility_modifier":
                accessibility = self._text(child)
            elif child.type == "override_modifier":
                override = True
            elif not child.is_named and child.type == "readonly":
                readonly = True
            elif not child.is_named and child.type == "=":
                break
            else:
                binding_end = child.end_byte
        if start_byte is None:
            start_byte = node.start_byte

        promoted = accessibility is not None or readonly or override
        binding_start = pattern.start_byte if promoted else start_byte
        binding_span = (self._char(binding_start), self._char(binding_end))

        binding: Node
        kind = pattern.type
        if kind in ("identifier", "this"):
            binding = Identifier(
                binding_span,
                name=self._text(pattern),
                type_annotation=annotation,
                optional=node.type == "optional_parameter",
            )
        elif kind == "rest_pattern":
            binding = RestElement(
                binding_span, argument=self._rest_argument(pattern), type_annotation=annotation
            )
        elif kind == "object_pattern":
            binding = ObjectPattern(
                binding_span, properties=self._convert_all(pattern), type_annotation=annotation
            )
        elif kind == "array_pattern":
            binding = ArrayPattern(
                binding_span, elements=self._convert_all(pattern), type_annotation=annotation
            )
        else:
            binding = self.convert(pattern)

        if value is not None:
            binding = AssignmentPattern(
                (binding_span[0], self._char(value.end_byte)),
                left=binding,
                right=self.convert(value),
            )

        # The outermost parameter node owns the decorators and its range covers them
        outer_start = self._char(node.start_byte if decorators else start_byte)
        if promoted:
            return TSParameterProperty(
                (outer_start, self._char(node.end_byte)),
                parameter=binding,
                accessibility=accessibility,
                readonly=readonly,
                override=override,
                decorators=tuple(decorators),
            )
        if decorators and isinstance(binding, _DECORATABLE):
            binding = replace(
                binding, range=(outer_start, binding.end), decorators=tuple(decorators)
            )
        return binding

    def _rest_argument(self, node: Any) -> Node:
        inner = self._named(node)
        if inner:
            return self.convert(inner[0])
        return OpaqueNode(self._span(node), node_type="rest_argument")

    def _annotated_type(self, type_annotation: Any) -> Optional[Node]:
        # ``: T`` -> T
        if type_annotation is None:
            return None
        inner = self._named(type_annotation)
        if not inner:
            return None
        return self.convert(inner[0])

    # -- context nodes --

    def _call(self, node: Any) -> Optional[CallExpression]:
        arguments = node.child_by_field_name("arguments")
        if arguments is None or arguments.type != "arguments":
            # Tagged templates are not calls in ESTree
            return None
        return CallExpression(
            self._span(node),
            callee=self.convert(node.child_by_field_name("function")),
            arguments=self._convert_all(arguments),
        )

    def _shorthand_property(self, node: Any) -> Property:
        ident = self._named(node)[0]
        key = Identifier(self._span(ident), name=self._text(ident))
        return Property(self._span(node), key=key, value=key, shorthand=True)

    def _declarator(self, node: Any) -> VariableDeclarator:
        name = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        value = node.child_by_field_name("value")

        target: Node
        if name.type == "identifier":
            end = type_node.end_byte if type_node is not None else name.end_byte
            target = Identifier(
                (self._char(name.start_byte), self._char(end)),
                name=self._text(name),
                type_annotation=self._annotated_type(type_node),
            )
        else:
            target = self.convert(name)
        return VariableDeclarator(
            self._span(node),
            id=target,
            init=self.convert(value) if value is not None else None,
        )

    def _literal(self, node: Any) -> Literal:
        raw = self._text(node)
        kind = _LITERAL_KINDS[node.type]
        value: Any = None
        if kind == "string":
            value = raw[1:-1]
        elif kind == "number":
            if raw.endswith("n"):
                kind = "bigint"
            value = raw
        elif kind == "boolean":
            value = raw == "true"
        return Literal(self._span(node), kind=kind, raw=raw, value=value)
