"""Rich terminal formatter: one table per file and a summary line."""

from io import StringIO
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..linter import FileReport
from ..rule import RULE_NAME
from .base import BaseFormatter, location


class StylishFormatter(BaseFormatter):
    """Human-readable output grouped by file."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, reports: List[FileReport]) -> None:
        self._print(reports, self.console)

    def format(self, reports: List[FileReport]) -> str:
        buffer = StringIO()
        self._print(reports, Console(file=buffer, width=120, no_color=True, highlight=False))
        return buffer.getvalue()

    def _print(self, reports: List[FileReport], console: Console) -> None:
        problems = 0
        fixable = 0
        errors = 0

        for report in reports:
            if report.error is not None:
                errors += 1
                console.print(f"[bold]{escape(report.path)}[/bold]")
                console.print(f"  [red]error[/red]  {escape(report.error)}")
                console.print()
                continue
            if not report.diagnostics:
                continue

            console.print(f"[bold underline]{escape(report.path)}[/bold underline]")
            table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 2))
            table.add_column("Location", justify="right", style="dim")
            table.add_column("Severity")
            table.add_column("Message")
            table.add_column("Rule", style="dim")
            for d in report.diagnostics:
                line, column, _, _ = location(report, d)
                message = escape(d.message) + (" [green](fixable)[/green]" if d.fixable else "")
                table.add_row(f"{line}:{column}", "[yellow]warning[/yellow]", message, RULE_NAME)
            console.print(table)
            console.print()

            problems += report.count
            fixable += report.fixable_count

        if problems == 0 and errors == 0:
            console.print("[green]No problems found.[/green]")
            return

        summary = f"{problems} problem{'s' if problems != 1 else ''}"
        if fixable:
            summary += f", {fixable} fixable with --fix"
        if errors:
            summary += f", {errors} file{'s' if errors != 1 else ''} with errors"
        console.print(f"[bold yellow]{summary}[/bold yellow]")
