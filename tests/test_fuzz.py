"""Fuzz tests for import-groups robustness under random input."""

from __future__ import annotations

from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

from import_groups.engine import apply_fix, scan_source
from import_groups.lib import config
from import_groups.lib.classifier import classify
from import_groups.lib.models import Configuration, GroupTag
from import_groups.lib.options import validate_options
from import_groups.lib.walker import parse_source

ALIASED = Configuration(alias_patterns=("@app/",))

module_paths = st.builds(
    lambda prefix, name: prefix + name,
    st.sampled_from(["", "./", "../", "../../", "@app/", "@scope/"]),
    st.text(alphabet="abcXYZ-_/.", min_size=1, max_size=12),
)

import_blocks = st.lists(
    st.tuples(
        module_paths,
        st.sampled_from(
            ["\n", "\n\n", " // tail\n", " /* tail */\n", "\n// note\n", "\n/* block */\n"]
        ),
    ),
    min_size=1,
    max_size=15,
)


def _render(entries: list[tuple[str, str]]) -> str:
    parts = []
    for index, (path, gap) in enumerate(entries):
        parts.append(f"import m{index} from '{path}'{gap}")
    return "".join(parts) + "run()\n"


class TestConfigGetFuzz:
    """Fuzz the config.get() accessor with arbitrary key paths."""

    @given(st.text(min_size=0, max_size=200))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_get_str_never_crashes(self, key: str) -> None:
        """config.get_str() raises or returns str, never crashes."""
        try:
            result = config.get_str(key)
            assert isinstance(result, str)
        except (KeyError, TypeError):
            pass


class TestClassifyFuzz:
    """Fuzz the classifier with arbitrary module paths."""

    @given(st.text(min_size=0, max_size=100))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_total_and_deterministic(self, module_path: str) -> None:
        """Every string gets exactly one group, the same one every time."""
        first = classify(module_path, ALIASED)
        assert isinstance(first, GroupTag)
        assert classify(module_path, ALIASED) is first


class TestValidateOptionsFuzz:
    """Fuzz validate_options with arbitrary YAML-like structures."""

    @given(
        st.one_of(
            st.none(),
            st.integers(),
            st.text(max_size=50),
            st.lists(st.text(max_size=20), max_size=5),
            st.dictionaries(
                keys=st.sampled_from(
                    ["alias-prefix", "aliases", "alphabetical-by-full-path", "logging", "other"]
                ),
                values=st.one_of(
                    st.none(), st.booleans(), st.integers(), st.text(max_size=20),
                    st.lists(st.one_of(st.text(max_size=10), st.integers()), max_size=4),
                    st.dictionaries(
                        keys=st.sampled_from(["enabled", "directory", "other"]),
                        values=st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=10)),
                        max_size=3,
                    ),
                ),
                max_size=5,
            ),
        )
    )
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_always_returns_messages(self, data) -> None:
        """validate_options never raises and returns a list of strings."""
        errors = validate_options(data)
        assert isinstance(errors, list)
        assert all(isinstance(e, str) for e in errors)


class TestFixFuzz:
    """Fuzz the analyzer and planner with generated import lists."""

    @given(import_blocks)
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_fix_is_clean(self, entries: list[tuple[str, str]]) -> None:
        """Applying the planned rewrite leaves nothing to report."""
        source = _render(entries)
        result = scan_source(source, "fuzz.ts", ALIASED)
        fixed = apply_fix(source, result)
        rescanned = scan_source(fixed, "fuzz.ts", ALIASED)
        assert rescanned.diagnostics == []
        assert rescanned.fix is None

    @given(import_blocks)
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_fix_keeps_every_import(self, entries: list[tuple[str, str]]) -> None:
        """The rewrite is a permutation of the original imports."""
        source = _render(entries)
        fixed = apply_fix(source, scan_source(source, "fuzz.ts", ALIASED))
        before = sorted(s.text for s in parse_source(source).imports)
        after = sorted(s.text for s in parse_source(fixed).imports)
        assert before == after
        assert fixed.endswith("run()\n")

    @given(st.text(max_size=300))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_walker_raises_only_syntax_errors(self, source: str) -> None:
        """Arbitrary text either parses or raises SyntaxError."""
        try:
            parsed = parse_source(source)
        except SyntaxError:
            return
        for stmt in parsed.statements:
            assert 0 <= stmt.start <= stmt.end <= len(source)
