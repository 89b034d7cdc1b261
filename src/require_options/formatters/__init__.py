"""Output formatters for lint results."""

from ..exceptions import InvalidConfigError
from .base import BaseFormatter
from .github_formatter import GithubFormatter
from .json_formatter import JsonFormatter
from .stylish_formatter import StylishFormatter

FORMATTERS = {
    "stylish": StylishFormatter,
    "json": JsonFormatter,
    "github": GithubFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "stylish", "json", "github"

    Raises:
        InvalidConfigError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise InvalidConfigError(
            "output_format", name, f"choose from {', '.join(sorted(FORMATTERS))}"
        )
    return cls()


__all__ = [
    "BaseFormatter",
    "StylishFormatter",
    "JsonFormatter",
    "GithubFormatter",
    "get_formatter",
]
