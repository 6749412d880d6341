"""import-groups engine — thin orchestrator for the import-group checks.

Composes the library modules to scan a JavaScript/TypeScript source string,
report how its imports break the grouping rules, and compute the single
rewrite that fixes them.  This is the main entry point for programmatic use.

Design notes:
    The engine never parses source directly.  It delegates to the walker
    (lib/walker) for statement extraction, to lib/planner for the rewrite
    and to lib/sequence for the pairwise checks.  The rewrite is planned
    once per file and shared by every violation in that file.
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from import_groups.exceptions import ImportGroupsParseError
from import_groups.lib import config
from import_groups.lib.formatter import (
    format_fix_hint,
    format_result_json,
    format_summary_stderr,
    format_violation_stderr,
    message_for,
)
from import_groups.lib.logger import log_scan
from import_groups.lib.models import Configuration, TextEdit, Violation, ViolationKind
from import_groups.lib.options import merge_overrides, resolve_options
from import_groups.lib.planner import plan
from import_groups.lib.sequence import analyze
from import_groups.lib.walker import ParsedSource, parse_source


@dataclass
class Diagnostic:
    """A violation resolved to a location and message for reporting."""

    start: int
    end: int
    line: int
    column: int
    kind: ViolationKind
    message: str
    module_path: str = ""
    source_line: str = ""
    fix: Optional[TextEdit] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "column": self.column,
            "start": self.start,
            "end": self.end,
            "kind": self.kind.value,
            "module": self.module_path,
            "message": self.message,
        }


@dataclass
class ScanResult:
    """Result of scanning one file."""

    filepath: str
    status: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fix: Optional[TextEdit] = None
    fixed: bool = False
    scan_ms: int = 0

    @property
    def violation_count(self) -> int:
        return len(self.diagnostics)


def scan_source(
    source: str,
    filepath: str = "",
    configuration: Optional[Configuration] = None,
) -> ScanResult:
    """Scan a source string for import-group violations.

    Args:
        source: JavaScript or TypeScript module text.
        filepath: Name used in diagnostics.  Defaults to the stdin name.
        configuration: Alias prefixes and sorting mode.  Defaults apply
            when omitted.

    Returns:
        ScanResult whose ``fix`` is set only when there is something to fix.

    Raises:
        ImportGroupsParseError: If the source cannot be scanned.
    """
    filepath = filepath or config.get_str("defaults.stdin_filename")
    configuration = configuration or Configuration()
    start = time.time()

    try:
        parsed = parse_source(source)
    except SyntaxError as exc:
        raise ImportGroupsParseError(filepath, exc) from exc

    fix = plan(parsed.statements, configuration, source)
    violations = analyze(parsed.statements, configuration, fix=fix)
    if not violations:
        fix = None

    diagnostics = [_diagnostic(parsed, v) for v in violations]
    status = config.get_str("statuses.rejected" if diagnostics else "statuses.passed")

    return ScanResult(
        filepath=filepath,
        status=status,
        diagnostics=diagnostics,
        fix=fix,
        scan_ms=int((time.time() - start) * 1000),
    )


def _diagnostic(parsed: ParsedSource, violation: Violation) -> Diagnostic:
    """Resolve a violation to 1-based line/column and its message."""
    column = parsed.column_of(violation.start)
    return Diagnostic(
        start=violation.start,
        end=violation.end,
        line=violation.line + 1,
        column=column + 1,
        kind=violation.kind,
        message=message_for(violation.kind),
        module_path=violation.module_path,
        source_line=parsed.line_text(violation.line),
        fix=violation.fix,
    )


def apply_fix(source: str, result: ScanResult) -> str:
    """Return ``source`` with the result's planned rewrite applied."""
    if result.fix is None:
        return source
    return result.fix.apply(source)


def scan_file(
    filepath: Union[str, Path],
    *,
    options_path: Optional[Union[str, Path]] = None,
    aliases: Optional[list[str]] = None,
    sort_by_full_path: Optional[bool] = None,
    write_fix: bool = False,
) -> ScanResult:
    """Scan a file on disk, optionally rewriting its imports in place.

    Options come from the nearest ``.import_groups.yaml`` (or
    ``options_path``), with ``aliases`` and ``sort_by_full_path`` layered
    on top.

    Raises:
        OSError: If the file cannot be read or written.
        ImportGroupsParseError: If the source cannot be scanned.
        ImportGroupsConfigError: If the options file is invalid.
    """
    path = Path(filepath)
    source = path.read_text(encoding="utf-8")

    options = merge_overrides(
        resolve_options(path, options_path),
        aliases=aliases,
        sort_by_full_path=sort_by_full_path,
    )
    result = scan_source(source, str(filepath), Configuration.from_options(options))

    if write_fix and result.fix is not None:
        path.write_text(apply_fix(source, result), encoding="utf-8")
        result.fixed = True

    logging_cfg: dict[str, Any] = options.get("logging") or {}
    if logging_cfg.get("enabled", False) and logging_cfg.get("directory"):
        log_scan(
            logging_cfg["directory"],
            str(filepath),
            result.status,
            [
                {"line": d.line, "kind": d.kind.value, "module": d.module_path}
                for d in result.diagnostics
            ],
            source,
            result.scan_ms,
            fixed=result.fixed,
        )

    return result


def report(
    results: list[ScanResult],
    output_format: str = "",
    stream: Optional[TextIO] = None,
) -> None:
    """Write scan results to ``stream`` (stderr by default).

    Args:
        results: One ScanResult per file.
        output_format: 'stderr' for human output, 'json' for structured.
            Defaults to the value from config.
        stream: Destination stream.
    """
    stream = stream or sys.stderr
    output_format = output_format or config.get_str("formats.default")

    if output_format == config.get_str("formats.json"):
        documents = [
            format_result_json(
                r.filepath, r.status, [d.to_dict() for d in r.diagnostics], r.fix
            )
            for r in results
        ]
        stream.write(json.dumps(documents, indent=config.get_int("defaults.json_indent")) + "\n")
        return

    separator = config.get_str("formatting.violation_separator")
    parts: list[str] = []
    for result in results:
        for d in result.diagnostics:
            parts.append(format_violation_stderr(
                result.filepath,
                d.line,
                d.column,
                d.message,
                source_line=d.source_line,
                width=d.end - d.start,
            ))
        if result.fix is not None and not result.fixed:
            parts.append(format_fix_hint(result.filepath))

    violation_count = sum(r.violation_count for r in results)
    fixable = sum(1 for r in results if r.fix is not None and not r.fixed)
    parts.append(format_summary_stderr(len(results), violation_count, fixable))
    stream.write(separator.join(parts) + "\n")
