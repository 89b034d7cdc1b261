"""Type text for the generated options type.

Best effort only: an explicit annotation wins, then the kind of a literal
default, then the unknown-type marker.
"""

from __future__ import annotations

from .parameters import ParameterDescriptor

UNKNOWN_TYPE = "any"

_LITERAL_TYPES = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
}


def infer_type(descriptor: ParameterDescriptor) -> str:
    if descriptor.type_text:
        return descriptor.type_text
    if descriptor.default_kind is not None:
        return _LITERAL_TYPES.get(descriptor.default_kind, UNKNOWN_TYPE)
    return UNKNOWN_TYPE
