"""Parameter classification.

Every formal parameter maps to exactly one shape. ``Unrecognized`` is the
total fallback: it keeps the raw text so a rewrite can still pass it through.

Shapes only hold what code generation needs (names and source substrings)
plus the original node, whose range bounds the rewrite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..syntax.nodes import (
    ArrayPattern,
    AssignmentPattern,
    Identifier,
    Literal,
    Node,
    ObjectPattern,
    RestElement,
    TSParameterProperty,
)
from ..syntax.tree import SourceText


@dataclass(frozen=True)
class Simple:
    node: Node
    name: str
    type_text: Optional[str] = None
    optional: bool = False


@dataclass(frozen=True)
class Defaulted:
    node: Node
    name: str
    default_text: str
    type_text: Optional[str] = None
    # Literal kind of the default expression, None when it isn't a literal
    default_kind: Optional[str] = None


@dataclass(frozen=True)
class PropertyPromoted:
    """Constructor parameter property. The modifier is dropped on rewrite."""

    node: Node
    name: str
    type_text: Optional[str] = None
    optional: bool = False
    modifier: str = ""


@dataclass(frozen=True)
class Rest:
    node: Node
    raw_text: str


@dataclass(frozen=True)
class AlreadyDestructured:
    node: Node
    raw_text: str


@dataclass(frozen=True)
class Decorated:
    """A parameter with decorators; they have no place on an options object."""

    node: Node
    raw_text: str


@dataclass(frozen=True)
class Unrecognized:
    node: Node
    raw_text: str


Parameter = Union[
    Simple, Defaulted, PropertyPromoted, Rest, AlreadyDestructured, Decorated, Unrecognized
]


@dataclass(frozen=True)
class ParameterDescriptor:
    """Read-only projection of a Parameter used for code generation."""

    name: str
    default_text: Optional[str] = None
    type_text: Optional[str] = None
    optional: bool = False
    had_explicit_type: bool = False
    default_kind: Optional[str] = None


def classify(node: Node, source: SourceText) -> Parameter:
    """Determine the shape of one parameter node."""
    if getattr(node, "decorators", ()):
        return Decorated(node=node, raw_text=source.get_text(node))
    if isinstance(node, TSParameterProperty):
        return _classify_promoted(node, source)
    if isinstance(node, Identifier):
        return Simple(
            node=node,
            name=node.name,
            type_text=_type_text(node.type_annotation, source),
            optional=node.optional,
        )
    if isinstance(node, AssignmentPattern):
        if isinstance(node.left, Identifier):
            return _defaulted(node, node.left, node.right, source)
        if isinstance(node.left, (ObjectPattern, ArrayPattern)):
            return AlreadyDestructured(node=node, raw_text=source.get_text(node))
    if isinstance(node, RestElement):
        return Rest(node=node, raw_text=source.get_text(node))
    if isinstance(node, (ObjectPattern, ArrayPattern)):
        return AlreadyDestructured(node=node, raw_text=source.get_text(node))
    return Unrecognized(node=node, raw_text=source.get_text(node))


def _classify_promoted(node: TSParameterProperty, source: SourceText) -> Parameter:
    inner = node.parameter
    if isinstance(inner, Identifier):
        return PropertyPromoted(
            node=node,
            name=inner.name,
            type_text=_type_text(inner.type_annotation, source),
            optional=inner.optional,
            modifier=_modifier_text(node),
        )
    if isinstance(inner, AssignmentPattern) and isinstance(inner.left, Identifier):
        # ``private x = 1``: same modifier loss as a plain promoted parameter
        return _defaulted(node, inner.left, inner.right, source)
    return Unrecognized(node=node, raw_text=source.get_text(node))


def _defaulted(node: Node, left: Identifier, right: Node, source: SourceText) -> Defaulted:
    return Defaulted(
        node=node,
        name=left.name,
        default_text=source.get_text(right),
        type_text=_type_text(left.type_annotation, source),
        default_kind=right.kind if isinstance(right, Literal) else None,
    )


def _type_text(annotation: Optional[Node], source: SourceText) -> Optional[str]:
    if annotation is None:
        return None
    return source.get_text(annotation)


def _modifier_text(node: TSParameterProperty) -> str:
    parts = []
    if node.accessibility:
        parts.append(node.accessibility)
    if node.override:
        parts.append("override")
    if node.readonly:
        parts.append("readonly")
    return " ".join(parts)


def describe(parameter: Parameter) -> ParameterDescriptor:
    """Project a classified parameter onto its codegen descriptor."""
    if isinstance(parameter, (Simple, PropertyPromoted)):
        return ParameterDescriptor(
            name=parameter.name,
            type_text=parameter.type_text,
            optional=parameter.optional,
            had_explicit_type=parameter.type_text is not None,
        )
    if isinstance(parameter, Defaulted):
        return ParameterDescriptor(
            name=parameter.name,
            default_text=parameter.default_text,
            type_text=parameter.type_text,
            optional=True,
            had_explicit_type=parameter.type_text is not None,
            default_kind=parameter.default_kind,
        )
    return ParameterDescriptor(name=parameter.raw_text)
