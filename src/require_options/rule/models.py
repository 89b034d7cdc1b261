"""Diagnostics and fixes produced by the rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..syntax.nodes import Node, Span

RULE_NAME = "require-options-object"
RULE_DESCRIPTION = (
    "Enforce using an options object when a function has more than three parameters"
)
MESSAGE_ID = "requireOptions"
MESSAGES = {
    MESSAGE_ID: "Use an options object instead of {count} parameters.",
}


@dataclass(frozen=True)
class Fix:
    """One contiguous text replacement. ``range`` is half-open."""

    range: Span
    text: str


@dataclass(frozen=True)
class Diagnostic:
    node: Node
    message_id: str
    data: dict = field(default_factory=dict)
    fix: Optional[Fix] = None

    @property
    def range(self) -> Span:
        return self.node.range

    @property
    def message(self) -> str:
        return MESSAGES[self.message_id].format(**self.data)

    @property
    def fixable(self) -> bool:
        return self.fix is not None
