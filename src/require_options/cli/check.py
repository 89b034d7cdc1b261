"""Check command: lint files and optionally apply fixes."""

from pathlib import Path
from typing import List, Optional

import typer

from ..exceptions import RequireOptionsError
from ..formatters import get_formatter
from ..linter import lint_files
from ..logging_config import setup_logging, verbosity_from_flags
from . import app
from ._common import (
    EXIT_CLEAN,
    EXIT_DIAGNOSTICS,
    EXIT_ERROR,
    FormatChoice,
    console,
    resolve_config,
)


@app.command()
def check(
    paths: List[Path] = typer.Argument(
        ...,
        help="Files or directories to lint",
    ),
    fix: bool = typer.Option(
        False,
        "--fix",
        help="Rewrite fixable functions in place",
    ),
    output_format: Optional[FormatChoice] = typer.Option(
        None,
        "-f",
        "--format",
        help="Output format",
        case_sensitive=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    max_fix_passes: Optional[int] = typer.Option(
        None,
        "--max-fix-passes",
        help="Upper bound on lint/fix rounds per file",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write logs to this file",
    ),
):
    """
    Lint TypeScript and JavaScript files.

    Exits 0 when clean, 1 when problems remain, 2 on configuration or file errors.

    [bold cyan]Examples:[/bold cyan]

      require-options check src/

      require-options check src/app.ts --fix

      require-options check . --format json
    """
    log_path = str(log_file) if log_file else None
    logger = setup_logging(verbosity_from_flags(verbose, quiet), log_path)

    try:
        settings = resolve_config(
            config=config,
            output_format=output_format.value if output_format else None,
            max_fix_passes=max_fix_passes,
            verbose=verbose,
            quiet=quiet,
        )
        # Config files and environment may set a different verbosity
        setup_logging(settings.verbosity, log_path)
        reports = lint_files(paths, settings, fix=fix)
        get_formatter(settings.output_format).render(reports)

    except RequireOptionsError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR)

    except KeyboardInterrupt:
        logger.info("Lint interrupted by user")
        console.print("\n[yellow]Lint interrupted[/yellow]")
        raise typer.Exit(130)

    if any(r.error is not None for r in reports):
        raise typer.Exit(EXIT_ERROR)
    if any(r.diagnostics for r in reports):
        raise typer.Exit(EXIT_DIAGNOSTICS)
    raise typer.Exit(EXIT_CLEAN)
