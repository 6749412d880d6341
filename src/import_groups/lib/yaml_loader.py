"""yaml_loader — unified YAML loading for import-groups option files.

Wraps PyYAML's ``safe_load`` behind a single entry point shared by the
options layer, the theme and the tests, so that encoding and safe-parsing
choices are made in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml


def load_yaml(path: Union[str, Path]) -> Optional[Any]:
    """Load a YAML file and return its contents.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or None if the file is empty.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)
