"""Shared test fixtures for require-options tests."""

import os

import pytest

from require_options.config import LintConfig
from require_options.linter import Linter
from require_options.syntax.normalizer import TreeSitterNormalizer


@pytest.fixture(scope="session")
def normalizer():
    """One normalizer for the whole run; grammars load once."""
    return TreeSitterNormalizer()


@pytest.fixture(scope="session")
def linter(normalizer):
    """Linter running the rule over tree-sitter trees."""
    return Linter(normalizer=normalizer)


@pytest.fixture
def parse_ts(normalizer):
    """Parse TypeScript source into a SyntaxTree."""

    def _parse(code, language="typescript"):
        return normalizer.parse(code, language)

    return _parse


@pytest.fixture
def config():
    """Default lint configuration."""
    return LintConfig()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty home and cwd so no stray config files are picked up."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("REQUIRE_OPTIONS_"):
            monkeypatch.delenv(key)
    return work


@pytest.fixture
def ts_project(tmp_path):
    """Small project tree with flagged, clean, excluded and unsupported files."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "node_modules" / "lib").mkdir(parents=True)
    (root / ".cache").mkdir()

    (root / "src" / "flagged.ts").write_text(
        "export function build(a, b, c, d) {\n  return a + b + c + d;\n}\n"
    )
    (root / "src" / "clean.ts").write_text("export const add = (a: number, b: number) => a + b;\n")
    (root / "src" / "util.js").write_text("function pick(a, b, c, d, e) { return e; }\n")
    (root / "src" / "types.d.ts").write_text("declare function f(a, b, c, d): void;\n")
    (root / "src" / "notes.md").write_text("# notes\n")
    (root / "node_modules" / "lib" / "index.js").write_text("function x(a, b, c, d) {}\n")
    (root / ".cache" / "tmp.ts").write_text("function y(a, b, c, d) {}\n")
    return root
