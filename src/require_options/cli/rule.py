"""Rule command: describe the rule."""

from rich.table import Table

from ..rule import MESSAGES, RequireOptionsObject
from . import app
from ._common import console


@app.command()
def rule():
    """
    Show the rule's name, threshold and whitelisted callback methods.
    """
    r = RequireOptionsObject()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan")
    table.add_column("Value")
    table.add_row("Name", r.name)
    table.add_row("Description", r.description)
    table.add_row("Max parameters", str(r.max_parameters))
    table.add_row("Fixable", "yes" if r.fixable else "no")
    table.add_row("Callback methods", ", ".join(sorted(r.std_callback_methods)))
    table.add_row("Message", MESSAGES[r.message_id])
    console.print(table)
