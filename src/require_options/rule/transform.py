"""Builds the single-range rewrite into one destructured options parameter.

The replacement spans from the first parameter's start to the last
parameter's end. Parentheses, trailing commas, comments outside that span
and the return type are never touched.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .models import Fix
from .parameters import (
    AlreadyDestructured,
    Decorated,
    Defaulted,
    Parameter,
    ParameterDescriptor,
    Rest,
    describe,
)
from .types import infer_type

PROPERTY_SEPARATOR = ", "
TYPE_SEPARATOR = "; "


def braces(items: Iterable[str], separator: str) -> str:
    """Render ``{ a<sep>b<sep>c }``; the one place brace spacing is decided."""
    return "{ " + separator.join(items) + " }"


def build_fix(parameters: Sequence[Parameter]) -> Optional[Fix]:
    """Return the rewrite for ``parameters``, or None when no safe rewrite exists.

    Existing destructuring, rest parameters and decorated parameters can't
    be merged into one options object without guessing, so they suppress
    the fix.
    """
    if not parameters:
        return None
    if any(isinstance(p, (AlreadyDestructured, Decorated, Rest)) for p in parameters):
        return None

    descriptors = [describe(p) for p in parameters]
    text = braces((_property(d) for d in descriptors), PROPERTY_SEPARATOR)

    # A signature with no annotations at all doesn't gain an ``any``-filled type
    if any(d.had_explicit_type for d in descriptors):
        text += ": " + braces((_type_entry(d) for d in descriptors), TYPE_SEPARATOR)

    return Fix(range=(parameters[0].node.start, parameters[-1].node.end), text=text)


def _property(descriptor: ParameterDescriptor) -> str:
    if descriptor.default_text is not None:
        return f"{descriptor.name} = {descriptor.default_text}"
    return descriptor.name


def _type_entry(descriptor: ParameterDescriptor) -> str:
    optional = "?" if descriptor.optional else ""
    return f"{descriptor.name}{optional}: {infer_type(descriptor)}"
