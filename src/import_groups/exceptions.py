"""Custom exceptions for import-groups.

The analysis core never raises: degenerate input yields no violations.
These exceptions belong to the host side, where source text is scanned
and option files are read.

Exceptions:
    ImportGroupsError — Common base class.
    ImportGroupsParseError — The walker could not scan a source file.
        Wraps the original scanner error.
    ImportGroupsConfigError — A project options file is malformed.
        Carries every validation message found.
"""

from __future__ import annotations

from import_groups.lib import config


class ImportGroupsError(Exception):
    """Base class for all import-groups errors."""


class ImportGroupsParseError(ImportGroupsError):
    """Raised when a source file cannot be scanned for imports.

    A file whose imports cannot be located is reported as an error rather
    than silently passing.
    """

    def __init__(self, filepath: str, original_error: Exception) -> None:
        """Initialize with parse error details.

        Args:
            filepath: Path to the file that failed scanning.
            original_error: The underlying scanner exception.
        """
        self.filepath = filepath
        self.original_error = original_error
        msg = config.get_str("messages.parse_error")
        super().__init__(msg.format(filepath=filepath, error=original_error))


class ImportGroupsConfigError(ImportGroupsError):
    """Raised when a project options file fails validation."""

    def __init__(self, path: str, errors: list[str]) -> None:
        """Initialize with validation details.

        Args:
            path: Path to the options file.
            errors: Human-readable validation messages.
        """
        self.path = path
        self.errors = errors
        msg = config.get_str("messages.config_error")
        super().__init__(msg.format(path=path, errors="; ".join(errors)))
