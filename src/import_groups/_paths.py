"""Centralized path resolution for the import_groups package.

This is the only module that touches ``__file__``.  Package data (the
defaults file and the terminal theme) is located relative to it.
"""

from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def config_dir() -> Path:
    """Return the config/ directory path."""
    return _PACKAGE_DIR / "config"


def cli_dir() -> Path:
    """Return the cli/ directory path."""
    from import_groups.lib.config import get_str

    return _PACKAGE_DIR / get_str("directories.cli")


def theme_path() -> Path:
    """Return the path to cli/theme.yaml."""
    from import_groups.lib.config import get_str

    return cli_dir() / get_str("filenames.theme")
