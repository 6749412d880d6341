"""classifier — map a module path to its import group.

Prefixes are tested in reverse canonical order so that the explicit
relative prefixes and configured aliases win, and ``module`` is the
fallback for bare package names.  Nothing here keeps state; the
precedence sequence is an immutable tuple.
"""

from __future__ import annotations

from import_groups.lib.models import CANONICAL_ORDER, Configuration, GroupTag

CURRENT_DIRECTORY_PREFIX = "./"
PARENT_DIRECTORY_PREFIX = "../"

_FIXED_PREFIXES: dict[GroupTag, tuple[str, ...]] = {
    GroupTag.CURRENT_DIRECTORY: (CURRENT_DIRECTORY_PREFIX,),
    GroupTag.PARENT_DIRECTORY: (PARENT_DIRECTORY_PREFIX,),
}


def classify(module_path: str, config: Configuration) -> GroupTag:
    """Return the group a module path belongs to.

    Args:
        module_path: The unquoted module specifier.
        config: Active configuration (supplies alias prefixes).

    Returns:
        The matching GroupTag; ``GroupTag.MODULE`` when nothing else matches.
    """
    for tag in reversed(CANONICAL_ORDER):
        if tag is GroupTag.ALIAS:
            prefixes = config.alias_patterns
        else:
            prefixes = _FIXED_PREFIXES.get(tag, ())
        if prefixes and module_path.startswith(prefixes):
            return tag
    return GroupTag.MODULE


def sort_key(
    module_path: str, tag: GroupTag, config: Configuration
) -> tuple[str, ...]:
    """Return the ordering key for a module path within its group.

    Package and alias imports compare on their root segment first, then on
    the trailing segment, with the full path as the last tie-breaker.
    Relative imports, and every import when ``sort_by_full_path`` is set,
    compare on the full path.  Comparison is ordinal and case-sensitive.
    """
    if config.sort_by_full_path or tag.is_relative:
        return (module_path,)
    root = module_path.split("/", 1)[0]
    member = module_path.rsplit("/", 1)[-1]
    return (root, member, module_path)


def is_sorted(
    current: str, following: str, tag: GroupTag, config: Configuration
) -> bool:
    """True if ``current`` may appear directly before ``following``."""
    return sort_key(current, tag, config) <= sort_key(following, tag, config)

