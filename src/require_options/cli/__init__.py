"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="require-options",
    help="require-options - flag functions that should take an options object",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Flag functions with more than three parameters and rewrite them to take
    a single destructured options object.

    [bold cyan]Examples:[/bold cyan]

      require-options check src/

      require-options check src/ --fix

      require-options check src/ --format github
    """
    if version:
        console.print(
            f"[bold cyan]require-options[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .check import check as _check  # noqa: F401, E402
from .rule import rule as _rule  # noqa: F401, E402
