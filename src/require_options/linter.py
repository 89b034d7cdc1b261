"""Host runtime: runs the rule over syntax trees, applies fixes, lints files.

Usage:
    linter = Linter()
    diagnostics = linter.lint_source(code, "typescript")
    result = linter.fix_source(code, "typescript")
    reports = lint_files([Path("src")], load_config())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .config import LintConfig
from .exceptions import FileAccessError, InvalidPathError, ParsingError, UnsupportedLanguageError
from .logging_config import get_logger
from .rule import Diagnostic, RequireOptionsObject, RuleContext
from .syntax.languages import detect_language, is_supported
from .syntax.normalizer import TreeSitterNormalizer
from .syntax.tree import SourceText, SyntaxTree

logger = get_logger(__name__)

DEFAULT_MAX_FIX_PASSES = 10

# Directory names never descended into, whatever the exclude patterns say
SKIP_DIRS = frozenset({"node_modules", "bower_components", "vendor"})


@dataclass
class FixResult:
    output: str
    fixed: bool = False
    applied: int = 0
    passes: int = 0


@dataclass
class FileReport:
    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    source: Optional[SourceText] = None
    error: Optional[str] = None
    fixed: bool = False

    @property
    def count(self) -> int:
        return len(self.diagnostics)

    @property
    def fixable_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.fixable)


class Linter:
    """Dispatches the rule's visitors over a tree and collects its diagnostics."""

    def __init__(
        self,
        rule: Optional[RequireOptionsObject] = None,
        normalizer: Optional[TreeSitterNormalizer] = None,
    ) -> None:
        self.rule = rule or RequireOptionsObject()
        self._normalizer = normalizer

    @property
    def normalizer(self) -> TreeSitterNormalizer:
        if self._normalizer is None:
            self._normalizer = TreeSitterNormalizer()
        return self._normalizer

    def lint_tree(self, tree: SyntaxTree) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        context = RuleContext(
            source=tree.source, parent_of=tree.parent_of, report=diagnostics.append
        )
        visitors = self.rule.visitors(context)
        for node in tree.walk():
            visitor = visitors.get(node.type)
            if visitor is not None:
                visitor(node)
        return sorted(diagnostics, key=lambda d: d.range[0])

    def lint_source(self, source: str, language: str, path: str = "<source>") -> list[Diagnostic]:
        """Parse and lint source text.

        Raises:
            ParsingError: If the source has syntax errors
            UnsupportedLanguageError: If there's no grammar for ``language``
        """
        return self.lint_tree(self.normalizer.parse(source, language, path))

    def fix_source(
        self,
        source: str,
        language: str,
        path: str = "<source>",
        max_passes: int = DEFAULT_MAX_FIX_PASSES,
    ) -> FixResult:
        """Lint and apply fixes repeatedly until nothing changes."""
        result = FixResult(output=source)
        for _ in range(max_passes):
            diagnostics = self.lint_source(result.output, language, path)
            output, applied = apply_fixes(result.output, diagnostics)
            if applied == 0:
                break
            result.output = output
            result.applied += applied
            result.passes += 1
            result.fixed = True
        else:
            # Every pass applied something; only warn if the last one left more
            pending = sum(1 for d in self.lint_source(result.output, language, path) if d.fixable)
            if pending:
                logger.warning(
                    f"{path}: {pending} fix(es) still pending after {max_passes} passes"
                )
        return result


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> tuple[str, int]:
    """Apply non-overlapping fixes in source order.

    A fix that overlaps one already accepted is left for the next pass.

    Returns:
        (new source, number of fixes applied)
    """
    fixes = sorted((d.fix for d in diagnostics if d.fix is not None), key=lambda f: f.range)
    parts: list[str] = []
    cursor = 0
    applied = 0
    for fix in fixes:
        start, end = fix.range
        if start < cursor:
            continue
        parts.append(source[cursor:start])
        parts.append(fix.text)
        cursor = end
        applied += 1
    parts.append(source[cursor:])
    return "".join(parts), applied


def collect_files(paths: Sequence[Path], config: LintConfig) -> list[Path]:
    """Expand ``paths`` into the list of files to lint.

    Files named explicitly are kept if their language is supported; directories
    are walked recursively and filtered by extension, exclude patterns, hidden
    directories and size.

    Raises:
        InvalidPathError: If a path doesn't exist
    """
    files: list[Path] = []
    seen: set[Path] = set()

    def _add(filepath: Path) -> bool:
        if len(files) >= config.max_files:
            logger.warning(f"Reached max files limit ({config.max_files})")
            return False
        resolved = filepath.resolve()
        if resolved not in seen:
            seen.add(resolved)
            files.append(filepath)
        return True

    for path in paths:
        if not path.exists():
            raise InvalidPathError(path, "does not exist")
        if path.is_file():
            if not is_supported(path):
                logger.warning(f"Skipped (unsupported extension): {path}")
                continue
            if not _add(path):
                break
            continue

        for filepath in sorted(path.rglob("*")):
            if not filepath.is_file() or not is_supported(filepath):
                continue
            relative = filepath.relative_to(path)
            if any(part.startswith(".") or part in SKIP_DIRS for part in relative.parts[:-1]):
                continue
            if any(relative.match(p) or filepath.match(p) for p in config.exclude_patterns):
                logger.debug(f"Skipped (pattern): {filepath}")
                continue
            try:
                size = filepath.stat().st_size
            except OSError as e:
                logger.warning(f"Cannot stat {filepath}: {e}")
                continue
            if size > config.max_file_size_bytes:
                logger.debug(f"Skipped (size): {filepath} ({size} bytes)")
                continue
            if not _add(filepath):
                return files
    return files


def lint_file(path: Path, linter: Linter, config: LintConfig, fix: bool = False) -> FileReport:
    """Lint one file, optionally writing fixes back.

    Raises:
        FileAccessError: If the file can't be read or written
        ParsingError: If the file has syntax errors
        UnsupportedLanguageError: If the extension isn't supported
    """
    language = detect_language(path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, str(e))

    report = FileReport(path=str(path))
    if fix:
        result = linter.fix_source(source, language, str(path), config.max_fix_passes)
        if result.fixed:
            try:
                path.write_text(result.output, encoding="utf-8")
            except OSError as e:
                raise FileAccessError(path, str(e))
            logger.info(f"Fixed {result.applied} function(s) in {path}")
            report.fixed = True
        source = result.output

    report.diagnostics = linter.lint_source(source, language, str(path))
    report.source = SourceText(source)
    return report


def lint_files(
    paths: Sequence[Path],
    config: LintConfig,
    fix: bool = False,
    linter: Optional[Linter] = None,
) -> list[FileReport]:
    """Lint every file under ``paths``; per-file failures are reported, not raised."""
    linter = linter or Linter()
    reports: list[FileReport] = []
    files = collect_files(paths, config)
    logger.debug(f"Linting {len(files)} file(s)")

    for filepath in files:
        try:
            reports.append(lint_file(filepath, linter, config, fix=fix))
        except FileAccessError as e:
            logger.warning(f"Access error for {filepath}: {e.reason}")
            reports.append(FileReport(path=str(filepath), error=str(e)))
        except ParsingError as e:
            logger.warning(f"Parse error for {filepath}: {e.reason}")
            reports.append(FileReport(path=str(filepath), error=str(e)))
        except UnsupportedLanguageError as e:
            logger.warning(f"Skipped {filepath}: {e}")
            reports.append(FileReport(path=str(filepath), error=str(e)))

    return reports
