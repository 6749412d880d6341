"""logger — JSONL scan telemetry.

When a project's options enable ``logging``, every scanned file appends one
JSON line to a log inside the configured directory.  Each entry records the
file, pass/reject status, a summary of each violation, whether a fix was
applied, a truncated SHA-256 hash of the source, and timing.  The file name
and formatting constants come from ``config/defaults.yaml``.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import os
from typing import Any

from import_groups.lib import config


def log_scan(
    log_dir: str,
    filepath: str,
    status: str,
    violations_data: list[dict[str, Any]],
    source: str,
    scan_ms: int,
    fixed: bool = False,
) -> None:
    """Write a JSONL log entry for a scan result.

    Args:
        log_dir: Directory to write the log file in.
        filepath: Path to the scanned file.
        status: Scan status ('rejected' or 'passed').
        violations_data: List of violation summary dicts.
        source: The source code that was scanned.
        scan_ms: Scan duration in milliseconds.
        fixed: Whether the planned rewrite was written back.
    """
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, config.get_str("filenames.scan_log"))

    utc_src = config.get_str("formatting.utc_offset_source")
    utc_rep = config.get_str("formatting.utc_offset_replacement")
    hash_prefix = config.get_str("formatting.hash_prefix")
    hash_trunc = config.get_int("defaults.hash_truncation_length")
    separators = tuple(config.get_list("formatting.json_separators"))

    entry: dict[str, Any] = {
        "timestamp": (
            datetime.datetime.now(datetime.timezone.utc)
            .isoformat()
            .replace(utc_src, utc_rep)
        ),
        "event": "fix" if fixed else "scan",
        "file": filepath,
        "status": status,
        "violations": violations_data,
        "code_length_lines": len(source.splitlines()),
        "code_hash": hash_prefix + hashlib.sha256(source.encode()).hexdigest()[:hash_trunc],
        "scan_ms": scan_ms,
    }

    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(json.dumps(entry, separators=separators) + "\n")
