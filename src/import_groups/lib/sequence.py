"""sequence — pairwise sequencing checks over a file's import statements.

Each statement is compared with the one that directly follows it.  When
the two sit on consecutive lines they form one visual block and must share
a group and be sorted; when a blank line separates them they must belong
to different groups, in canonical order.  A non-import successor ends the
block and is never reported.  The analysis never looks further than one
statement ahead.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from import_groups.lib.classifier import classify, is_sorted
from import_groups.lib.models import (
    Configuration,
    ImportStatement,
    Statement,
    TextEdit,
    Violation,
    ViolationKind,
)


def analyze(
    statements: Sequence[Statement],
    config: Configuration,
    fix: Optional[TextEdit] = None,
) -> list[Violation]:
    """Return every sequencing violation between neighbouring statements.

    Args:
        statements: The file's top-level statements in source order.
        config: Active configuration.
        fix: Planned rewrite to attach to each violation, if any.

    Returns:
        Violations in source order.  Empty for zero or one import.
    """
    violations: list[Violation] = []

    for current, following in zip(statements, statements[1:]):
        if not isinstance(current, ImportStatement):
            continue
        if not isinstance(following, ImportStatement):
            continue

        kind = _check_pair(current, following, config)
        if kind is None:
            continue
        violations.append(Violation(
            start=following.start,
            end=following.end,
            kind=kind,
            line=following.line,
            module_path=following.module_path,
            fix=fix,
        ))

    return violations


def _check_pair(
    current: ImportStatement,
    following: ImportStatement,
    config: Configuration,
) -> Optional[ViolationKind]:
    """Decide which rule, if any, the pair breaks."""
    line_gap = following.line - current.end_line
    current_tag = classify(current.module_path, config)
    following_tag = classify(following.module_path, config)

    if line_gap == 1:
        if following_tag is not current_tag:
            return ViolationKind.NOT_SEPARATED
        if not is_sorted(
            current.module_path, following.module_path, current_tag, config
        ):
            return ViolationKind.NOT_SORTED
    elif line_gap > 1:
        if following_tag is current_tag:
            return ViolationKind.NOT_GROUPED
        if following_tag.precedence < current_tag.precedence:
            return ViolationKind.OUT_OF_ORDER

    return None
