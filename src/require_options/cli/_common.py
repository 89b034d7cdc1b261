"""Shared CLI helpers."""

from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import LintConfig, load_config

console = Console()

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2


class FormatChoice(str, Enum):
    """Values accepted by ``--format``."""

    stylish = "stylish"
    json = "json"
    github = "github"


def resolve_config(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    max_fix_passes: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> LintConfig:
    """Build config from CLI options."""
    overrides = {}
    if output_format is not None:
        overrides["output_format"] = output_format
    if max_fix_passes is not None:
        overrides["max_fix_passes"] = max_fix_passes
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
