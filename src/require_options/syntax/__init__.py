"""Syntax tree model and the builders that produce it."""

from .estree import from_estree
from .languages import SUPPORTED_EXTENSIONS, detect_language, is_supported
from .normalizer import TreeSitterNormalizer
from .tree import ParentLookup, SourceText, SyntaxTree

__all__ = [
    "SyntaxTree",
    "SourceText",
    "ParentLookup",
    "from_estree",
    "TreeSitterNormalizer",
    "detect_language",
    "is_supported",
    "SUPPORTED_EXTENSIONS",
]
