"""Decides whether a function-like node is in scope for the rule.

A function is left alone when its signature is presumably dictated by
someone else: an explicitly typed variable, a standard-library callback, an
object property consumed elsewhere, or any callback argument.
"""

from __future__ import annotations

from typing import Optional

from ..syntax.nodes import (
    AssignmentExpression,
    CallExpression,
    FunctionNode,
    Identifier,
    MemberExpression,
    Property,
    VariableDeclarator,
)
from ..syntax.tree import ParentLookup

MAX_PARAMETERS = 3

# Higher-order methods whose callback signature is fixed by the standard library
STD_CALLBACK_METHODS = frozenset({"replaceAll"})

TYPED_DECLARATOR = "typed-declarator"
WITHIN_LIMIT = "within-limit"
STD_CALLBACK = "std-callback"
PROPERTY_CALLBACK = "property-callback"
CALL_ARGUMENT = "call-argument"


def exclusion_reason(node: FunctionNode, parent_of: ParentLookup) -> Optional[str]:
    """Return why ``node`` is out of scope, or None if the rule applies.

    Checks run in a fixed order and the first match wins.
    """
    parent = parent_of(node)

    if _is_typed_declarator_init(node, parent):
        return TYPED_DECLARATOR
    if len(node.params) <= MAX_PARAMETERS:
        return WITHIN_LIMIT
    if _is_std_callback(node, parent):
        return STD_CALLBACK
    if _is_property_callback(node, parent):
        return PROPERTY_CALLBACK
    if _is_call_argument(node, parent):
        return CALL_ARGUMENT
    return None


def is_in_scope(node: FunctionNode, parent_of: ParentLookup) -> bool:
    return exclusion_reason(node, parent_of) is None


def _is_typed_declarator_init(node: FunctionNode, parent) -> bool:
    return (
        isinstance(parent, VariableDeclarator)
        and parent.init is node
        and isinstance(parent.id, Identifier)
        and parent.id.type_annotation is not None
    )


def _is_std_callback(node: FunctionNode, parent) -> bool:
    if not _is_call_argument(node, parent):
        return False
    callee = parent.callee
    return (
        isinstance(callee, MemberExpression)
        and not callee.computed
        and isinstance(callee.property, Identifier)
        and callee.property.name in STD_CALLBACK_METHODS
    )


def _is_property_callback(node: FunctionNode, parent) -> bool:
    # { listener: (a, b, c, d) => {} } but not { method(a, b, c, d) {} }
    if isinstance(parent, Property) and parent.value is node and not parent.method:
        return True
    # obj.listener = (a, b, c, d) => {}
    return (
        isinstance(parent, AssignmentExpression)
        and parent.right is node
        and isinstance(parent.left, MemberExpression)
    )


def _is_call_argument(node: FunctionNode, parent) -> bool:
    return isinstance(parent, CallExpression) and any(arg is node for arg in parent.arguments)
