"""Unit tests for import_groups.lib.config defaults accessor."""

from __future__ import annotations

import pytest

from import_groups.lib import config


class TestLoadDefaults:
    """Tests for config loading and caching."""

    def test_loads_successfully(self) -> None:
        """defaults.yaml loads without error."""
        data = config.load_defaults()
        assert isinstance(data, dict)

    def test_cached_on_second_call(self) -> None:
        """Second call returns the same dict object (cached)."""
        first = config.load_defaults()
        second = config.load_defaults()
        assert first is second

    def test_reset_clears_cache(self) -> None:
        """reset() forces a fresh load on next call."""
        first = config.load_defaults()
        config.reset()
        second = config.load_defaults()
        assert first is not second
        assert first == second


class TestGet:
    """Tests for the dot-notation accessor."""

    def test_nested_key(self) -> None:
        """Access a nested value."""
        assert config.get("statuses.passed") == "passed"

    def test_missing_key_raises(self) -> None:
        """Missing key raises KeyError naming the segment."""
        with pytest.raises(KeyError, match="nonexistent"):
            config.get("nonexistent.key")

    def test_every_violation_kind_has_a_message(self) -> None:
        """Each ViolationKind value maps to a message string."""
        from import_groups.lib.models import ViolationKind

        for kind in ViolationKind:
            assert config.get_str(f"violations.{kind.value}")


class TestTypedAccessors:
    """Tests for get_str, get_int, get_list."""

    def test_get_str_wrong_type(self) -> None:
        """get_str raises TypeError when value is not a string."""
        with pytest.raises(TypeError, match="Expected str"):
            config.get_str("statuses")

    def test_get_int(self) -> None:
        """Exit codes are integers."""
        assert config.get_int("exit_codes.ok") == 0
        assert config.get_int("exit_codes.violations") == 1

    def test_get_int_wrong_type(self) -> None:
        """get_int raises TypeError when value is not an int."""
        with pytest.raises(TypeError, match="Expected int"):
            config.get_int("statuses.passed")

    def test_get_list(self) -> None:
        """The scanned extensions are a list."""
        assert ".ts" in config.get_list("extensions")

    def test_get_list_wrong_type(self) -> None:
        """get_list raises TypeError when value is not a list."""
        with pytest.raises(TypeError, match="Expected list"):
            config.get_list("statuses.passed")
