"""Allow ``python -m require_options``."""

from .cli import app

app()
