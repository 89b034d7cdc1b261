"""REQUIRE_OPTIONS_OBJECT: more than three parameters should be an options object.

Fires on function declarations, function expressions and arrow functions.
Each in-scope node gets exactly one diagnostic; the fix is attached only when
the parameters can be merged into a single destructured object safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..logging_config import get_logger
from ..syntax.nodes import FunctionNode
from ..syntax.tree import ParentLookup, SourceText
from .applicability import MAX_PARAMETERS, STD_CALLBACK_METHODS, exclusion_reason
from .models import MESSAGE_ID, RULE_DESCRIPTION, RULE_NAME, Diagnostic
from .parameters import classify
from .transform import build_fix

logger = get_logger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """What the host hands the rule for one tree."""

    source: SourceText
    parent_of: ParentLookup
    report: Callable[[Diagnostic], None]


class RequireOptionsObject:
    """Flags functions with more than three parameters and proposes an options object."""

    name = RULE_NAME
    description = RULE_DESCRIPTION
    message_id = MESSAGE_ID
    fixable = True
    max_parameters = MAX_PARAMETERS
    std_callback_methods = STD_CALLBACK_METHODS

    def visitors(self, context: RuleContext) -> dict[str, Callable[[FunctionNode], None]]:
        """Visitor entry points keyed by node type."""

        def check(node: FunctionNode) -> None:
            self.check(node, context)

        return {
            "FunctionDeclaration": check,
            "FunctionExpression": check,
            "ArrowFunctionExpression": check,
        }

    def check(self, node: FunctionNode, context: RuleContext) -> None:
        reason = exclusion_reason(node, context.parent_of)
        if reason is not None:
            logger.debug(f"Skipped {node.type} at {node.start}: {reason}")
            return

        parameters = [classify(p, context.source) for p in node.params]
        fix = build_fix(parameters)
        if fix is None:
            logger.debug(f"No safe fix for {node.type} at {node.start}")

        context.report(
            Diagnostic(
                node=node,
                message_id=MESSAGE_ID,
                data={"count": len(node.params)},
                fix=fix,
            )
        )
