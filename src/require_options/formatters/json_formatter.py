"""JSON formatter for lint results."""

import json
from typing import List

from ..linter import FileReport
from .base import BaseFormatter, location


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render(self, reports: List[FileReport]) -> None:
        print(self.format(reports))

    def format(self, reports: List[FileReport]) -> str:
        data = []
        for report in reports:
            diagnostics = []
            for d in report.diagnostics:
                line, column, end_line, end_column = location(report, d)
                diagnostics.append(
                    {
                        "line": line,
                        "column": column,
                        "endLine": end_line,
                        "endColumn": end_column,
                        "messageId": d.message_id,
                        "message": d.message,
                        "data": d.data,
                        "fix": (
                            {"range": list(d.fix.range), "text": d.fix.text}
                            if d.fix is not None
                            else None
                        ),
                    }
                )
            data.append(
                {
                    "path": report.path,
                    "error": report.error,
                    "fixed": report.fixed,
                    "diagnostics": diagnostics,
                }
            )
        return json.dumps(data, indent=2)
