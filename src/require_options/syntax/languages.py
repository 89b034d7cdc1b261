"""Language detection for files the linter can build trees for."""

from dataclasses import dataclass
from pathlib import Path

from ..exceptions import UnsupportedLanguageError


@dataclass(frozen=True)
class LanguageConfig:
    """What the linter needs to know about a language."""

    name: str
    extensions: tuple[str, ...]


LANGUAGES: dict[str, LanguageConfig] = {
    "typescript": LanguageConfig(name="typescript", extensions=(".ts", ".mts", ".cts")),
    "tsx": LanguageConfig(name="tsx", extensions=(".tsx",)),
    "javascript": LanguageConfig(name="javascript", extensions=(".js", ".mjs", ".cjs", ".jsx")),
}

_EXTENSION_MAP: dict[str, str] = {
    ext: cfg.name for cfg in LANGUAGES.values() for ext in cfg.extensions
}

SUPPORTED_EXTENSIONS = frozenset(_EXTENSION_MAP)


def detect_language(path: Path) -> str:
    """Map a file path to a language name.

    Raises:
        UnsupportedLanguageError: If the extension isn't linted
    """
    language = _EXTENSION_MAP.get(path.suffix.lower())
    if language is None:
        raise UnsupportedLanguageError(path.suffix or path.name, sorted(LANGUAGES))
    return language


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS
