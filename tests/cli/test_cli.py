"""Tests for the command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from require_options import __version__
from require_options.cli import app

runner = CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def project(tmp_path, isolated_config):
    """A flagged file and a clean file."""
    (tmp_path / "flagged.ts").write_text("function build(a, b, c, d) {}\n")
    (tmp_path / "clean.ts").write_text("function ok(a) {}\n")
    return tmp_path


class TestCheck:
    """The check command."""

    def test_diagnostics_exit_one(self, project):
        """Remaining problems exit 1."""
        result = runner.invoke(app, ["check", str(project / "flagged.ts")])
        assert result.exit_code == 1
        assert "Use an options object instead of 4 parameters." in result.output

    def test_clean_exit_zero(self, project):
        """Clean files exit 0."""
        result = runner.invoke(app, ["check", str(project / "clean.ts")])
        assert result.exit_code == 0
        assert "No problems found." in result.output

    def test_fix(self, project):
        """--fix rewrites and exits 0 when nothing remains."""
        result = runner.invoke(app, ["check", str(project), "--fix"])
        assert result.exit_code == 0
        assert (project / "flagged.ts").read_text() == "function build({ a, b, c, d }) {}\n"

    def test_json_format(self, project):
        """--format json prints parseable JSON."""
        result = runner.invoke(app, ["check", str(project / "flagged.ts"), "--format", "json"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data[0]["diagnostics"][0]["data"] == {"count": 4}

    def test_github_format(self, project):
        """--format github prints annotations."""
        result = runner.invoke(app, ["check", str(project / "flagged.ts"), "-f", "github"])
        assert result.stdout.startswith("::warning file=")

    def test_config_file_format(self, project):
        """Output format can come from a config file."""
        config = project / "ro.toml"
        config.write_text('output_format = "json"\n')
        result = runner.invoke(app, ["check", str(project / "flagged.ts"), "--config", str(config)])
        assert json.loads(result.stdout)[0]["path"].endswith("flagged.ts")

    def test_missing_path_exit_two(self, project):
        """A missing path is a usage error."""
        result = runner.invoke(app, ["check", str(project / "nope")])
        assert result.exit_code == 2

    def test_parse_error_exit_two(self, project):
        """Per-file errors exit 2."""
        (project / "broken.ts").write_text("function (\n")
        result = runner.invoke(app, ["check", str(project / "broken.ts")])
        assert result.exit_code == 2

    def test_invalid_format_rejected(self, project):
        """Unknown formats are rejected by the option parser."""
        result = runner.invoke(app, ["check", str(project), "--format", "xml"])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "xml" in result.output

    def test_format_case_insensitive(self, project):
        """Format names match regardless of case."""
        result = runner.invoke(app, ["check", str(project / "flagged.ts"), "--format", "JSON"])
        assert result.exit_code == 1
        assert json.loads(result.stdout)[0]["diagnostics"][0]["data"] == {"count": 4}

    def test_config_verbosity_sets_log_level(self, project):
        """A verbosity from the config file decides the log level."""
        config = project / "ro.toml"
        config.write_text('verbosity = "quiet"\n')
        runner.invoke(app, ["check", str(project / "clean.ts"), "--config", str(config)])
        assert logging.getLogger("require_options").level == logging.ERROR

    def test_verbose_flag_sets_debug(self, project):
        """-v turns on debug logging."""
        runner.invoke(app, ["check", str(project / "clean.ts"), "-v"])
        assert logging.getLogger("require_options").level == logging.DEBUG


class TestRuleAndVersion:
    """Informational commands."""

    def test_rule(self):
        """rule prints the rule's metadata."""
        result = runner.invoke(app, ["rule"])
        assert result.exit_code == 0
        assert "require-options-object" in result.output
        assert "replaceAll" in result.output

    def test_version(self):
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
