"""Tree-sitter parser wrapper.

Provides one interface for parsing TypeScript, TSX and JavaScript source.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "typescript")
"""

from __future__ import annotations

from typing import Any

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from ..exceptions import UnsupportedLanguageError
from ..logging_config import get_logger

logger = get_logger(__name__)

_LANGUAGE_FACTORIES = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
    "javascript": tree_sitter_javascript.language,
}


def get_supported_languages() -> list[str]:
    """Get list of languages with a grammar."""
    return sorted(_LANGUAGE_FACTORIES)


class TreeSitterParser:
    """Wrapper around tree-sitter for multi-language parsing.

    Parsers are created lazily, one per language, and reused.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}

    def _parser_for(self, language: str) -> tree_sitter.Parser:
        parser = self._parsers.get(language)
        if parser is not None:
            return parser

        factory = _LANGUAGE_FACTORIES.get(language)
        if factory is None:
            raise UnsupportedLanguageError(language, get_supported_languages())

        # tree-sitter >= 0.23 grammars return a PyCapsule; wrap in Language()
        lang_obj = tree_sitter.Language(factory())
        parser = tree_sitter.Parser(lang_obj)
        self._parsers[language] = parser
        logger.debug(f"Created tree-sitter parser for {language}")
        return parser

    def parse(self, code: bytes, language: str) -> Any:
        """Parse code and return the tree-sitter Tree.

        Raises:
            UnsupportedLanguageError: If there's no grammar for ``language``
        """
        return self._parser_for(language).parse(code)
