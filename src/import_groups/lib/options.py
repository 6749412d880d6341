"""options — project-level option discovery, validation and layering.

A project may place a ``.import_groups.yaml`` file next to its sources (or
in any parent directory).  It accepts the same keys as the lint rule's
argument object::

    alias-prefix: "@app/"
    aliases: ["~/", "@shared/"]
    alphabetical-by-full-path: false
    logging:
      enabled: true
      directory: ".import_groups_logs"

Command-line overrides are layered on top of the file, and the merged
mapping is turned into an immutable ``Configuration`` once per run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from import_groups.exceptions import ImportGroupsConfigError
from import_groups.lib import config
from import_groups.lib.yaml_loader import load_yaml


def find_options_file(start: Union[str, Path]) -> Optional[Path]:
    """Look for the project options file from ``start`` upwards.

    Args:
        start: A file or directory to begin the search from.

    Returns:
        Path of the nearest options file, or None if there is none.
    """
    filename = config.get_str("filenames.project_config")
    here = Path(start).resolve()
    if not here.is_dir():
        here = here.parent
    for directory in (here, *here.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def validate_options(data: Any) -> list[str]:
    """Validate the structure of an options mapping.

    Returns a list of human-readable error strings (empty = valid).

    Args:
        data: The parsed YAML content.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        errors.append(f"Options must be a mapping, got {type(data).__name__}")
        return errors

    known = config.get_list("options.known_keys")
    for key in data:
        if key not in known:
            errors.append(f"Unknown option: {key!r}")

    prefix = data.get(config.get_str("options.alias_prefix"))
    if prefix is not None and not isinstance(prefix, str):
        errors.append(f"'alias-prefix' must be a string, got {type(prefix).__name__}")

    aliases = data.get(config.get_str("options.aliases"))
    if aliases is not None:
        if not isinstance(aliases, list):
            errors.append(f"'aliases' must be a list, got {type(aliases).__name__}")
        else:
            for alias in aliases:
                if not isinstance(alias, str) or not alias:
                    errors.append(f"'aliases' entries must be non-empty strings, got {alias!r}")

    by_full_path = data.get(config.get_str("options.sort_by_full_path"))
    if by_full_path is not None and not isinstance(by_full_path, bool):
        errors.append(
            "'alphabetical-by-full-path' must be a boolean, "
            f"got {type(by_full_path).__name__}"
        )

    logging = data.get(config.get_str("options.logging"))
    if logging is not None:
        if not isinstance(logging, dict):
            errors.append(f"'logging' must be a mapping, got {type(logging).__name__}")
        else:
            errors.extend(_validate_logging(logging))

    return errors


def _validate_logging(logging: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    known = config.get_list("options.logging_keys")
    for key in logging:
        if key not in known:
            errors.append(f"Unknown logging option: {key!r}")

    enabled = logging.get("enabled")
    if enabled is not None and not isinstance(enabled, bool):
        errors.append(f"'logging.enabled' must be a boolean, got {type(enabled).__name__}")

    directory = logging.get("directory")
    if directory is not None and (not isinstance(directory, str) or not directory):
        errors.append(f"'logging.directory' must be a non-empty string, got {directory!r}")

    return errors


def load_options(path: Union[str, Path]) -> dict[str, Any]:
    """Load and validate an options file.

    An empty file means "all defaults".

    Raises:
        FileNotFoundError: If the file does not exist.
        ImportGroupsConfigError: If the file is not valid YAML or its
            contents fail validation.
    """
    try:
        data = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ImportGroupsConfigError(str(path), [str(exc)]) from exc
    if data is None:
        return {}
    errors = validate_options(data)
    if errors:
        raise ImportGroupsConfigError(str(path), errors)
    return data


def merge_overrides(
    options: dict[str, Any],
    aliases: Optional[list[str]] = None,
    sort_by_full_path: Optional[bool] = None,
) -> dict[str, Any]:
    """Return a new options mapping with command-line values applied.

    Aliases given on the command line are appended to the file's aliases.
    """
    merged = dict(options)
    if aliases:
        key = config.get_str("options.aliases")
        merged[key] = [*merged.get(key, []), *aliases]
    if sort_by_full_path is not None:
        merged[config.get_str("options.sort_by_full_path")] = sort_by_full_path
    return merged


def resolve_options(
    filepath: Union[str, Path],
    options_path: Optional[Union[str, Path]] = None,
) -> dict[str, Any]:
    """Load the options that apply to ``filepath``.

    An explicit ``options_path`` wins over discovery.  Without either,
    the empty mapping (all defaults) is returned.
    """
    path = Path(options_path) if options_path else find_options_file(filepath)
    if path is None:
        return {}
    return load_options(path)

