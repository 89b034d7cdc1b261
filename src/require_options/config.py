"""Configuration loading and management for require-options.

Configuration only shapes the host run: which files are linted, how many fix
passes are attempted and how results are printed. The rule itself has no
options; its arity threshold and callback whitelist are fixed.

Configuration sources are merged in priority order:
    1. Defaults (defined in LintConfig)
    2. Global config (~/.require-options.toml)
    3. Project config (./require-options.toml)
    4. Explicit config file
    5. Environment variables (REQUIRE_OPTIONS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, output_format="json")
    >>> config.verbosity
    'verbose'
    >>> config.output_format
    'json'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["stylish", "json", "github"]

ENV_PREFIX = "REQUIRE_OPTIONS_"
CONFIG_FILE_NAME = "require-options.toml"
GLOBAL_CONFIG_FILE_NAME = ".require-options.toml"


@dataclass(frozen=True)
class LintConfig:
    """Configuration for a lint run.

    Attributes:
        File filtering:
            exclude_patterns: Glob patterns (``Path.match``) to skip
            max_file_size_mb: Files larger than this are skipped
            max_files: Stop collecting after this many files

        Fixing:
            max_fix_passes: Upper bound on lint/fix rounds per file

        Output control:
            output_format: stylish, json or github
            verbosity: Logging verbosity level
    """

    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "dist/*",
            "build/*",
            "coverage/*",
            "out/*",
            ".git/*",
            "*.min.js",
            "*.bundle.js",
            "*.d.ts",
            "*.generated.*",
        ]
    )
    max_file_size_mb: float = 2.0
    max_files: int = 10000

    max_fix_passes: int = 10

    output_format: OutputFormat = "stylish"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.max_fix_passes < 1:
            raise InvalidConfigError("max_fix_passes", self.max_fix_passes, "must be at least 1")
        if self.output_format not in get_args(OutputFormat):
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"expected one of {', '.join(get_args(OutputFormat))}",
            )
        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity",
                self.verbosity,
                f"expected one of {', '.join(get_args(Verbosity))}",
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> LintConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask file values.

    Returns:
        Validated LintConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a key is unknown
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_FILE_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return LintConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from REQUIRE_OPTIONS_* environment variables.

    Supported environment variables:
        REQUIRE_OPTIONS_MAX_FILE_SIZE_MB: float
        REQUIRE_OPTIONS_MAX_FILES: int
        REQUIRE_OPTIONS_MAX_FIX_PASSES: int
        REQUIRE_OPTIONS_OUTPUT_FORMAT: stylish/json/github
        REQUIRE_OPTIONS_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(LintConfig)

    result: dict[str, Any] = {}

    for field_name in LintConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that can't be expressed in a single variable
    (lists such as exclude_patterns).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file can't be read or isn't valid TOML
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
