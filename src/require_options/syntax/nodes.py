"""Syntax tree model consumed by the rule.

The classes mirror the ESTree node types the rule needs to tell apart.
Everything else is an ``OpaqueNode`` that only carries its kind, its range and
its children, so the tree can still be walked end to end.

Nodes are immutable and hashed by identity: two structurally equal nodes at
different positions are different nodes. Ranges are half-open character
offsets into the source string.

Parameter nodes carry their decorators, and a decorated parameter's range
starts at its first decorator.

Parents are not stored on nodes. ``SyntaxTree.parent_of`` answers that
question from an index built once per tree.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterator, Optional, Tuple

Span = Tuple[int, int]


@dataclass(frozen=True, eq=False)
class Node:
    """Base node: a kind and a source range."""

    range: Span

    @property
    def type(self) -> str:
        """ESTree type name (class name for typed nodes)."""
        return type(self).__name__

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]

    def children(self) -> Iterator[Node]:
        """Yield direct child nodes in field order."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        yield item


@dataclass(frozen=True, eq=False)
class OpaqueNode(Node):
    """Any construct the rule never inspects directly."""

    node_type: str
    body: Tuple[Node, ...] = ()

    @property
    def type(self) -> str:
        return self.node_type


@dataclass(frozen=True, eq=False)
class Identifier(Node):
    """A name. ``type_annotation`` is the annotated type node, without the colon."""

    name: str
    type_annotation: Optional[Node] = None
    optional: bool = False
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class Literal(Node):
    """A literal value.

    ``kind`` is one of ``string``, ``number``, ``boolean``, ``null``,
    ``regex`` or ``bigint``.
    """

    kind: str
    raw: str
    value: Any = None


@dataclass(frozen=True, eq=False)
class AssignmentPattern(Node):
    """``left = right`` in a binding position (a defaulted parameter)."""

    left: Node
    right: Node
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class RestElement(Node):
    argument: Node
    type_annotation: Optional[Node] = None
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class ObjectPattern(Node):
    properties: Tuple[Node, ...] = ()
    type_annotation: Optional[Node] = None
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class ArrayPattern(Node):
    elements: Tuple[Node, ...] = ()
    type_annotation: Optional[Node] = None
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class TSParameterProperty(Node):
    """Constructor parameter promoted to a class field (``private x: T``)."""

    parameter: Node
    accessibility: Optional[str] = None
    readonly: bool = False
    override: bool = False
    decorators: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class FunctionNode(Node):
    """Shared shape of the three function-like node kinds."""

    params: Tuple[Node, ...] = ()
    id: Optional[Node] = None
    body: Optional[Node] = None
    return_type: Optional[Node] = None


@dataclass(frozen=True, eq=False)
class FunctionDeclaration(FunctionNode):
    pass


@dataclass(frozen=True, eq=False)
class FunctionExpression(FunctionNode):
    pass


@dataclass(frozen=True, eq=False)
class ArrowFunctionExpression(FunctionNode):
    pass


@dataclass(frozen=True, eq=False)
class CallExpression(Node):
    callee: Node
    arguments: Tuple[Node, ...] = ()


@dataclass(frozen=True, eq=False)
class MemberExpression(Node):
    """``object.property`` or, when ``computed``, ``object[property]``."""

    object: Node
    property: Node
    computed: bool = False


@dataclass(frozen=True, eq=False)
class Property(Node):
    """An object literal entry. ``method`` is true only for method shorthand."""

    key: Node
    value: Node
    method: bool = False
    shorthand: bool = False
    kind: str = "init"


@dataclass(frozen=True, eq=False)
class MethodDefinition(Node):
    """A class member function; ``value`` is its FunctionExpression."""

    key: Node
    value: Node
    kind: str = "method"
    static: bool = False


@dataclass(frozen=True, eq=False)
class AssignmentExpression(Node):
    left: Node
    right: Node
    operator: str = "="


@dataclass(frozen=True, eq=False)
class VariableDeclarator(Node):
    id: Node
    init: Optional[Node] = None


FUNCTION_TYPES = (FunctionDeclaration, FunctionExpression, ArrowFunctionExpression)
