"""import-groups — grouping, ordering and sorting checks for JS/TS imports.

Stable public API:
    classify: Map a module path to its GroupTag.
    analyze: Pairwise sequencing violations over a file's statements.
    plan: The single whole-block rewrite for a file's imports.
    parse_source: Extract top-level statements from source text.
    scan_source / scan_file: Run the full check on a string or a file.
    apply_fix: Apply a ScanResult's rewrite to the scanned source.
    Configuration, GroupTag, ImportStatement, Statement, TextEdit,
    Violation, ViolationKind: Data model.
    ImportGroupsParseError, ImportGroupsConfigError: Host-side errors.
"""

__version__ = "0.1.0"

from import_groups.engine import ScanResult, apply_fix, scan_file, scan_source
from import_groups.exceptions import ImportGroupsConfigError, ImportGroupsParseError
from import_groups.lib.classifier import classify
from import_groups.lib.models import (
    Configuration,
    GroupTag,
    ImportStatement,
    Statement,
    TextEdit,
    Violation,
    ViolationKind,
)
from import_groups.lib.planner import plan
from import_groups.lib.sequence import analyze
from import_groups.lib.walker import parse_source

__all__ = [
    "__version__",
    "analyze",
    "apply_fix",
    "classify",
    "parse_source",
    "plan",
    "scan_file",
    "scan_source",
    "Configuration",
    "GroupTag",
    "ImportGroupsConfigError",
    "ImportGroupsParseError",
    "ImportStatement",
    "ScanResult",
    "Statement",
    "TextEdit",
    "Violation",
    "ViolationKind",
]
