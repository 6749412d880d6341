"""Data models for import-group analysis.

Typed, immutable values shared by the classifier, the sequence analyzer
and the rewrite planner.  Statements are produced by the walker and only
referenced by the core, never copied or mutated.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union


# ---------------------------------------------------------------------------
# Group tags
# ---------------------------------------------------------------------------


class GroupTag(enum.Enum):
    """Origin of an import.  Declaration order is the canonical order."""

    MODULE = "module"
    ALIAS = "alias"
    PARENT_DIRECTORY = "parentDirectory"
    CURRENT_DIRECTORY = "currentDirectory"

    @property
    def precedence(self) -> int:
        """Index of the tag in the canonical order (lower comes first)."""
        return CANONICAL_ORDER.index(self)

    @property
    def is_relative(self) -> bool:
        return self in (GroupTag.PARENT_DIRECTORY, GroupTag.CURRENT_DIRECTORY)


CANONICAL_ORDER: tuple[GroupTag, ...] = tuple(GroupTag)


class ViolationKind(enum.Enum):
    """The four sequencing problems reported between adjacent imports."""

    OUT_OF_ORDER = "out_of_order"
    NOT_SEPARATED = "not_separated"
    NOT_GROUPED = "not_grouped"
    NOT_SORTED = "not_sorted"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Statement:
    """A top-level statement as seen by the walker.

    Attributes:
        start: Offset of the first character of the statement.
        end: Offset one past the last character of the statement.
        line: 0-based line of ``start``.
        end_line: 0-based line of the last character.
        text: The statement's source text.
    """

    start: int
    end: int
    line: int
    end_line: int
    text: str

    @property
    def is_import(self) -> bool:
        return False


@dataclass(frozen=True)
class ImportStatement(Statement):
    """An import declaration.

    Attributes:
        module_path: The module specifier with its quotes stripped.
    """

    module_path: str = ""

    @property
    def is_import(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Configuration:
    """Options that influence classification and sorting.

    Attributes:
        alias_patterns: Prefixes identifying an aliased-module import.
        sort_by_full_path: Compare whole module paths instead of the
            package-root/member two-level key.
    """

    alias_patterns: tuple[str, ...] = ()
    sort_by_full_path: bool = False

    @classmethod
    def from_options(
        cls, options: Union[dict[str, Any], list[Any], None]
    ) -> Configuration:
        """Build from a raw options mapping or a rule-argument list.

        A list is treated like a lint rule's argument array: only its
        first element is consulted.  ``alias-prefix`` (a single string)
        and ``aliases`` (a list) are merged.  Anything missing falls
        back to the defaults.

        Args:
            options: Parsed options, a rule-argument list, or None.

        Returns:
            A Configuration instance.
        """
        if isinstance(options, list):
            options = options[0] if options else None
        if not isinstance(options, dict):
            return cls()

        raw: list[Any] = []
        prefix = options.get("alias-prefix")
        if prefix:
            raw.append(prefix)
        aliases = options.get("aliases") or []
        if isinstance(aliases, str):
            aliases = [aliases]
        raw.extend(aliases)

        patterns: list[str] = []
        for pattern in raw:
            if isinstance(pattern, str) and pattern and pattern not in patterns:
                patterns.append(pattern)

        return cls(
            alias_patterns=tuple(patterns),
            sort_by_full_path=bool(options.get("alphabetical-by-full-path", False)),
        )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextEdit:
    """A single contiguous replacement of ``source[start:end]``."""

    start: int
    end: int
    replacement: str

    def apply(self, source: str) -> str:
        """Return ``source`` with this edit applied."""
        return source[: self.start] + self.replacement + source[self.end :]


@dataclass(frozen=True)
class Violation:
    """A sequencing problem anchored at the second import of a pair.

    Attributes:
        start: Offset where the offending import starts.
        end: Offset where the offending import ends.
        kind: Which rule was broken.
        line: 0-based line of ``start`` (for rendering).
        module_path: Module specifier of the offending import.
        fix: The whole-block rewrite, shared by every violation in a file.
    """

    start: int
    end: int
    kind: ViolationKind
    line: int = 0
    module_path: str = ""
    fix: Optional[TextEdit] = field(default=None, compare=False)
