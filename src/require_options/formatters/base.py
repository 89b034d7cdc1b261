"""Base formatter interface for lint output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..linter import FileReport
from ..rule import Diagnostic


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, reports: List[FileReport]) -> None:
        """Render reports to stdout."""

    @abstractmethod
    def format(self, reports: List[FileReport]) -> str:
        """Return formatted string representation of reports."""


def location(report: FileReport, diagnostic: Diagnostic) -> tuple[int, int, int, int]:
    """(line, column, end line, end column), all 1-based."""
    if report.source is None:
        return 0, 0, 0, 0
    line, column = report.source.line_col(diagnostic.range[0])
    end_line, end_column = report.source.line_col(diagnostic.range[1])
    return line, column, end_line, end_column
