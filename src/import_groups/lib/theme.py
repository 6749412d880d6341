"""theme — terminal colours for diagnostics.

Role names (``error``, ``fix``, ``file_path`` ...) are mapped to ANSI codes
through ``cli/theme.yaml``.  The file is read on first use.  Colour is only
emitted when the target stream is a TTY and ``NO_COLOR`` is not set.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Optional

from import_groups._paths import theme_path
from import_groups.lib.yaml_loader import load_yaml

_PASSTHROUGH_ROLES = ("bold", "dim", "reset")


class Theme:
    """Role-to-escape-code mapping, loaded lazily."""

    def __init__(self) -> None:
        self._codes: Optional[dict[str, str]] = None

    @property
    def codes(self) -> dict[str, str]:
        if self._codes is None:
            self._codes = self._load()
        return self._codes

    def _load(self) -> dict[str, str]:
        path = theme_path()
        if not path.is_file():
            return {}
        raw = load_yaml(path) or {}
        ansi: dict[str, str] = raw.get("ansi", {})
        codes = {role: ansi.get(name, "") for role, name in raw.get("roles", {}).items()}
        for role in _PASSTHROUGH_ROLES:
            codes[role] = ansi.get(role, "")
        return codes

    def enabled(self, stream: Any = None) -> bool:
        """True when colour codes should be written to ``stream``."""
        if os.environ.get("NO_COLOR"):
            return False
        target = stream or sys.stderr
        return hasattr(target, "isatty") and target.isatty()

    def code(self, role: str, *, stream: Any = None) -> str:
        """Return the escape code for ``role`` or an empty string."""
        if not self.enabled(stream):
            return ""
        return self.codes.get(role, "")

    def paint(self, text: str, role: str, *, stream: Any = None) -> str:
        """Wrap ``text`` in the colour for ``role`` when colour is enabled."""
        start = self.code(role, stream=stream)
        if not start:
            return text
        return f"{start}{text}{self.code('reset', stream=stream)}"


_theme = Theme()


def code(role: str, *, stream: Any = None) -> str:
    """Escape code for ``role`` from the shared theme."""
    return _theme.code(role, stream=stream)


def paint(text: str, role: str, *, stream: Any = None) -> str:
    """Colour ``text`` using the shared theme."""
    return _theme.paint(text, role, stream=stream)
