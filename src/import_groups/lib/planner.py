"""planner — compute the single whole-block rewrite for a file's imports.

Imports are bucketed by group in encounter order, each bucket is sorted
with the same key the sequence analyzer uses, and the buckets are joined
in canonical order with one blank line between non-empty buckets.  The
result replaces everything from the first import to the last one.

Text around the imports inside that span is carried along:

* a comment closing an import's own line stays on that line;
* comment lines directly above an import are emitted above its group;
* other statements (with their comments) are placed after the rewritten
  block, so a fix never drops code.

Lines are joined with the newline style the file already uses.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from import_groups.lib.classifier import classify, sort_key
from import_groups.lib.models import (
    CANONICAL_ORDER,
    Configuration,
    GroupTag,
    ImportStatement,
    Statement,
    TextEdit,
)

# One comment ending its line, right after a statement.
_TRAILING_COMMENT_RE = re.compile(r"[ \t]*(?://[^\r\n]*|/\*[^\r\n]*?\*/)[ \t]*(?=\r?\n|$)")
_SAME_LINE_RE = re.compile(r"[ \t]*")


@dataclass
class _Unit:
    """A statement with the comments that travel with it."""

    stmt: Statement
    leading: str = ""
    trailing: str = ""

    @property
    def body(self) -> str:
        return self.stmt.text + self.trailing


def newline_of(source: str) -> str:
    """Return the line break style of ``source``."""
    return "\r\n" if "\r\n" in source else "\n"


def plan(
    statements: Sequence[Statement],
    config: Configuration,
    source: str,
) -> Optional[TextEdit]:
    """Build the canonical rewrite of every import in the file.

    Args:
        statements: The file's top-level statements in source order.
        config: Active configuration.
        source: The full source text the statement offsets refer to.

    Returns:
        A TextEdit spanning first-to-last import, or None without imports.
    """
    positions = [i for i, s in enumerate(statements) if isinstance(s, ImportStatement)]
    if not positions:
        return None

    newline = newline_of(source)
    units = _units(statements, positions[0], positions[-1], source)

    buckets: dict[GroupTag, list[_Unit]] = {tag: [] for tag in CANONICAL_ORDER}
    moved: list[str] = []
    for unit in units:
        if isinstance(unit.stmt, ImportStatement):
            buckets[classify(unit.stmt.module_path, config)].append(unit)
        else:
            moved.append(newline.join(p for p in (unit.leading, unit.body) if p))

    blocks: list[str] = []
    for tag in CANONICAL_ORDER:
        members = buckets[tag]
        if not members:
            continue
        members = sorted(
            members, key=lambda u, t=tag: sort_key(u.stmt.module_path, t, config)
        )
        lines = [u.leading for u in members if u.leading]
        lines.extend(u.body for u in members)
        blocks.append(newline.join(lines))
    blocks.extend(moved)

    replacement = (newline * 2).join(blocks)
    start = units[0].stmt.start
    end = units[-1].stmt.end + len(units[-1].trailing)

    # Code sharing the last import's line is pushed onto a line of its own.
    rest = _SAME_LINE_RE.match(source, end).end()
    if rest < len(source) and source[rest] not in "\r\n":
        replacement += newline
        end = rest

    return TextEdit(start=start, end=end, replacement=replacement)


def _units(
    statements: Sequence[Statement], first: int, last: int, source: str
) -> list[_Unit]:
    """Split the trivia between statements ``first``..``last`` among them.

    The text between two statements holds only whitespace and comments.
    A comment ending the first statement's line belongs to it; anything
    after that belongs to the statement below.  Comments above the first
    import are outside the rewrite and stay where they are.
    """
    units = [_Unit(stmt) for stmt in statements[first : last + 1]]
    for index, unit in enumerate(units):
        following = first + index + 1
        gap_end = statements[following].start if following < len(statements) else len(source)
        gap = source[unit.stmt.end : gap_end]
        match = _TRAILING_COMMENT_RE.match(gap)
        if match:
            unit.trailing = match.group().rstrip()
            gap = gap[match.end() :]
        if index + 1 < len(units):
            units[index + 1].leading = gap.strip()
    return units
