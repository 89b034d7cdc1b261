"""
require-options - options-object lint rule for TypeScript and JavaScript

Flags function declarations, function expressions and arrow functions that
take more than three parameters, and rewrites them to take one destructured
options object when that can be done safely.
"""

__version__ = "0.1.0"

from .linter import FileReport, FixResult, Linter, apply_fixes, lint_files
from .rule import Diagnostic, Fix, RequireOptionsObject
from .syntax import SyntaxTree, TreeSitterNormalizer, from_estree

__all__ = [
    "Linter",  # Main entry point
    "lint_files",
    "apply_fixes",
    "FileReport",
    "FixResult",
    "RequireOptionsObject",  # Rule object for hosts with their own trees
    "Diagnostic",
    "Fix",
    "SyntaxTree",
    "TreeSitterNormalizer",
    "from_estree",
]
