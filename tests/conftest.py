"""Shared fixtures for the import-groups test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from import_groups.lib.models import Configuration, Statement
from import_groups.lib.walker import parse_source


FIXTURES_DIR = Path(__file__).parent / "fixtures"
PASSING_DIR = FIXTURES_DIR / "passing"
FAILING_DIR = FIXTURES_DIR / "failing"
EDGE_CASES_DIR = FIXTURES_DIR / "edge_cases"


def statements_of(source: str) -> list[Statement]:
    """Return the walker's statements for a source string."""
    return parse_source(source).statements


@pytest.fixture()
def default_config() -> Configuration:
    """Configuration with no aliases and two-level sorting."""
    return Configuration()


@pytest.fixture()
def alias_config() -> Configuration:
    """Configuration treating ``@app/`` imports as aliases."""
    return Configuration(alias_patterns=("@app/",))


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a .import_groups.yaml."""
    options: dict[str, Any] = {
        "alias-prefix": "@app/",
        "alphabetical-by-full-path": False,
    }
    with open(tmp_path / ".import_groups.yaml", "w", encoding="utf-8") as fh:
        yaml.dump(options, fh, default_flow_style=False)
    return tmp_path


@pytest.fixture()
def passing_source() -> str:
    """Return the contents of the canonical fixture."""
    return (PASSING_DIR / "canonical.tsx").read_text(encoding="utf-8")


@pytest.fixture()
def mixed_groups_source() -> str:
    """Return source mixing groups inside blocks."""
    return (FAILING_DIR / "mixed_groups.ts").read_text(encoding="utf-8")


@pytest.fixture()
def out_of_order_source() -> str:
    """Return source whose blocks are in reverse canonical order."""
    return (FAILING_DIR / "out_of_order.ts").read_text(encoding="utf-8")
