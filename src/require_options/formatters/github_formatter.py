"""GitHub Actions formatter: workflow annotations."""

from typing import List

from ..linter import FileReport
from ..rule import RULE_NAME
from .base import BaseFormatter, location


class GithubFormatter(BaseFormatter):
    """Output GitHub Actions ``::warning`` / ``::error`` annotations."""

    def render(self, reports: List[FileReport]) -> None:
        print(self.format(reports))

    def format(self, reports: List[FileReport]) -> str:
        lines: list[str] = []
        for r in reports:
            if r.error is not None:
                lines.append(f"::error file={r.path}::{_escape(r.error)}")
                continue
            for d in r.diagnostics:
                line, column, end_line, end_column = location(r, d)
                lines.append(
                    f"::warning file={r.path},line={line},col={column},"
                    f"endLine={end_line},endColumn={end_column},"
                    f"title={RULE_NAME}::{_escape(d.message)}"
                )
        return "\n".join(lines)


def _escape(message: str) -> str:
    # Workflow commands treat these as control characters in the message
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
