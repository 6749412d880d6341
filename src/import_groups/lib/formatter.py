"""formatter — diagnostic output for stderr and JSON.

Turns violations into the fixed messages from ``config/defaults.yaml`` and
renders them either as compiler-style text (``path:line:column`` followed by
the offending line and a caret underline) or as a JSON-compatible dict.
"""

from __future__ import annotations

from typing import Any, Optional

from import_groups.lib import config
from import_groups.lib.models import TextEdit, ViolationKind
from import_groups.lib.theme import code as _c


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def message_for(kind: ViolationKind) -> str:
    """Return the fixed message for a violation kind."""
    return config.get_str(f"violations.{kind.value}")


# ---------------------------------------------------------------------------
# Stderr formatting
# ---------------------------------------------------------------------------


def format_violation_stderr(
    filepath: str,
    line: int,
    column: int,
    message: str,
    source_line: str = "",
    width: int = 0,
) -> str:
    """Format a single diagnostic for stderr output.

    Args:
        filepath: Path of the scanned file.
        line: 1-based line of the diagnostic.
        column: 1-based column of the diagnostic.
        message: Violation message.
        source_line: The offending source line, shown under the location.
        width: Number of characters to underline on ``source_line``.

    Returns:
        Formatted multi-line string for stderr.
    """
    location_tpl = config.get_str("formatting.location_template")
    caret = config.get_str("formatting.caret_char")

    parts: list[str] = [
        f"  {_c('file_path')}"
        f"{location_tpl.format(filepath=filepath, line=line, column=column)}"
        f"{_c('reset')}"
    ]
    if source_line:
        parts.append(f"    {source_line}")
        underline = max(1, min(width, len(source_line) - (column - 1)))
        parts.append(
            f"    {_c('caret')}{' ' * (column - 1)}{caret * underline}{_c('reset')}"
        )
    parts.append(f"  {_c('error')}{message}{_c('reset')}")
    return "\n".join(parts)


def format_fix_hint(filepath: str) -> str:
    """Format the one-line hint that a whole-block fix is available."""
    fix_prefix = config.get_str("messages.fix_prefix")
    hint = config.get_str("messages.fix_available").format(filepath=filepath)
    return f"  {_c('fix')}{fix_prefix}{hint}{_c('reset')}"


def format_summary_stderr(file_count: int, violation_count: int, fixable_count: int) -> str:
    """Format the summary footer bar for stderr output.

    Args:
        file_count: Number of files scanned.
        violation_count: Total violations across all files.
        fixable_count: Files whose imports can be rewritten automatically.

    Returns:
        Formatted summary string.
    """
    bar_width = config.get_int("formatting.summary_bar_width")
    bar_char = config.get_str("formatting.summary_bar_char")
    lbl_files = config.get_str("labels.files")
    lbl_violations = config.get_str("labels.violations")
    lbl_fixable = config.get_str("labels.fixable")

    bar = f"{_c('summary_bar')}{bar_char * bar_width}{_c('reset')}"
    parts: list[str] = [f"\n{bar}"]
    parts.append(f"  {_c('bold')}{lbl_files}{_c('reset')} {_c('info')}{file_count}{_c('reset')}")
    parts.append(
        f"  {_c('bold')}{lbl_violations}{_c('reset')} "
        f"{_c('error')}{violation_count}{_c('reset')} "
        f"{_c('dim')}({fixable_count} {lbl_fixable}){_c('reset')}"
    )
    if violation_count:
        parts.append(f"  {_c('blocked')}{config.get_str('labels.rejected')}{_c('reset')}")
    else:
        parts.append(f"  {_c('allowed')}{config.get_str('labels.clean')}{_c('reset')}")
    parts.append(bar)
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# JSON formatting
# ---------------------------------------------------------------------------


def format_fix_json(fix: Optional[TextEdit]) -> Optional[dict[str, Any]]:
    """Render a TextEdit as a JSON-compatible dict (None stays None)."""
    if fix is None:
        return None
    return {"start": fix.start, "end": fix.end, "replacement": fix.replacement}


def format_result_json(
    filepath: str,
    status: str,
    diagnostics: list[dict[str, Any]],
    fix: Optional[TextEdit],
) -> dict[str, Any]:
    """Format one file's scan as a structured JSON-compatible dict.

    Args:
        filepath: Path of the scanned file.
        status: 'passed' or 'rejected'.
        diagnostics: Per-violation dicts (line, column, offsets, kind, message).
        fix: The shared whole-block rewrite, if one was planned.

    Returns:
        Dict suitable for json.dumps().
    """
    fix_json = format_fix_json(fix)
    return {
        "status": status,
        "file": filepath,
        "violations": [dict(d, fix=fix_json) for d in diagnostics],
        "summary": {
            "violations": len(diagnostics),
            "fixable": fix_json is not None and bool(diagnostics),
        },
    }
