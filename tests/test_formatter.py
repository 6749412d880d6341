"""Unit tests for import_groups.lib.formatter output formatting."""

from __future__ import annotations

from import_groups.lib.formatter import (
    format_fix_json,
    format_result_json,
    format_summary_stderr,
    format_violation_stderr,
    message_for,
)
from import_groups.lib.models import TextEdit, ViolationKind


class TestMessages:
    """Fixed messages per violation kind."""

    def test_distinct_messages(self):
        """Each kind has its own message."""
        messages = {message_for(kind) for kind in ViolationKind}
        assert len(messages) == len(ViolationKind)


class TestFormatViolationStderr:
    """Compiler-style single diagnostics."""

    def test_location_line_and_caret(self):
        """Location, source line, caret underline and message."""
        result = format_violation_stderr(
            "a.ts", 3, 1, "Must be sorted alphabetically",
            source_line="import a from 'a'", width=17,
        )
        lines = result.splitlines()
        assert lines[0].strip() == "a.ts:3:1"
        assert lines[1].strip() == "import a from 'a'"
        assert lines[2].strip() == "^" * 17
        assert lines[3].strip() == "Must be sorted alphabetically"

    def test_caret_is_clipped_to_the_line(self):
        """Multi-line imports only underline the first line."""
        result = format_violation_stderr(
            "a.ts", 1, 1, "msg", source_line="import {", width=40,
        )
        assert "^" * 8 in result
        assert "^" * 9 not in result

    def test_without_source_line(self):
        """No source line means no caret."""
        result = format_violation_stderr("a.ts", 1, 1, "msg")
        assert "^" not in result


class TestFormatSummaryStderr:
    """Summary footer."""

    def test_clean(self):
        """Zero violations reports a clean run."""
        result = format_summary_stderr(2, 0, 0)
        assert "All imports are grouped and sorted" in result

    def test_with_violations(self):
        """Counts and the rejected label appear."""
        result = format_summary_stderr(1, 3, 1)
        assert "3" in result
        assert "1 fixable" in result
        assert "Imports need regrouping" in result


class TestFormatResultJson:
    """Structured output."""

    def test_fix_shared_by_violations(self):
        """Every violation document embeds the same fix."""
        edit = TextEdit(start=0, end=5, replacement="x")
        result = format_result_json(
            "a.ts", "rejected", [{"line": 1}, {"line": 2}], edit
        )
        assert result["violations"][0]["fix"] == {"start": 0, "end": 5, "replacement": "x"}
        assert result["violations"][0]["fix"] == result["violations"][1]["fix"]
        assert result["summary"] == {"violations": 2, "fixable": True}

    def test_no_fix(self):
        """A clean file has no fix and is not fixable."""
        assert format_fix_json(None) is None
        result = format_result_json("a.ts", "passed", [], None)
        assert result["summary"]["fixable"] is False
