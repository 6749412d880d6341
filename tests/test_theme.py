"""Unit tests for import_groups.lib.theme ANSI colourisation."""

from __future__ import annotations

import io

from import_groups.lib.theme import Theme, code, paint


class _TTY(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


class TestTheme:
    """Tests for the Theme class."""

    def test_non_tty_is_plain(self):
        """Non-TTY streams get no escape codes."""
        assert paint("hello", "error", stream=io.StringIO()) == "hello"
        assert code("error", stream=io.StringIO()) == ""

    def test_tty_is_coloured(self, monkeypatch):
        """TTY streams get the role's code and a reset."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        result = paint("hello", "error", stream=_TTY())
        assert result.startswith("\x1b[31m")
        assert result.endswith("\x1b[0m")

    def test_no_color_env(self, monkeypatch):
        """NO_COLOR disables colour even on a TTY."""
        monkeypatch.setenv("NO_COLOR", "1")
        assert paint("hello", "error", stream=_TTY()) == "hello"

    def test_unknown_role(self, monkeypatch):
        """Unknown roles leave the text alone."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert paint("hello", "no-such-role", stream=_TTY()) == "hello"

    def test_lazy_loading(self):
        """Theme data is loaded on first use, not at construction."""
        theme = Theme()
        assert theme._codes is None
        _ = theme.codes
        assert theme._codes is not None
