"""The require-options-object rule: applicability, classification, inference and rewrite."""

from .applicability import MAX_PARAMETERS, STD_CALLBACK_METHODS, exclusion_reason, is_in_scope
from .models import MESSAGE_ID, MESSAGES, RULE_DESCRIPTION, RULE_NAME, Diagnostic, Fix
from .parameters import (
    AlreadyDestructured,
    Decorated,
    Defaulted,
    Parameter,
    ParameterDescriptor,
    PropertyPromoted,
    Rest,
    Simple,
    Unrecognized,
    classify,
    describe,
)
from .require_options_object import RequireOptionsObject, RuleContext
from .transform import build_fix
from .types import UNKNOWN_TYPE, infer_type

__all__ = [
    "RequireOptionsObject",
    "RuleContext",
    "Diagnostic",
    "Fix",
    "RULE_NAME",
    "RULE_DESCRIPTION",
    "MESSAGE_ID",
    "MESSAGES",
    "MAX_PARAMETERS",
    "STD_CALLBACK_METHODS",
    "exclusion_reason",
    "is_in_scope",
    "Parameter",
    "Simple",
    "Defaulted",
    "PropertyPromoted",
    "Rest",
    "AlreadyDestructured",
    "Decorated",
    "Unrecognized",
    "ParameterDescriptor",
    "classify",
    "describe",
    "infer_type",
    "UNKNOWN_TYPE",
    "build_fix",
]
