"""import-groups CLI entry point — argument parsing and command dispatch.

Builds the argparse parser tree and dispatches each subcommand to its
handler.  Program name, description, exit codes and messages are loaded
from the central config module so nothing is hardcoded.

Usage::

    import-groups check src/ app.ts [--format json] [--alias @app/]
    import-groups check --stdin --filename app.ts < app.ts
    import-groups fix src/
    import-groups classify lodash ./utils ../shared/x @app/store
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Iterator

from import_groups import __version__
from import_groups.engine import ScanResult, report, scan_file, scan_source
from import_groups.exceptions import ImportGroupsError
from import_groups.lib import config
from import_groups.lib.classifier import classify
from import_groups.lib.models import Configuration
from import_groups.lib.options import merge_overrides, resolve_options

_SKIPPED_DIRS = frozenset({"node_modules", ".git", "dist", "build"})


def iter_source_files(paths: list[str]) -> Iterator[Path]:
    """Yield every JS/TS file named by ``paths``, descending into directories."""
    extensions = tuple(config.get_list("extensions"))
    for raw in paths:
        path = Path(raw)
        if not path.is_dir():
            yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in _SKIPPED_DIRS)
            for name in sorted(files):
                if name.endswith(extensions):
                    yield Path(root) / name


def _error(message: str) -> None:
    sys.stderr.write(f"  {message}\n")


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _scan_all(args: argparse.Namespace, write_fix: bool) -> tuple[list[ScanResult], bool]:
    """Scan every requested file.  Returns the results and an error flag."""
    results: list[ScanResult] = []
    failed = False
    for path in iter_source_files(args.paths):
        try:
            results.append(scan_file(
                path,
                options_path=args.config,
                aliases=args.alias,
                sort_by_full_path=args.by_full_path,
                write_fix=write_fix,
            ))
        except OSError as exc:
            _error(config.get_str("messages.file_error").format(filepath=path, error=exc))
            failed = True
        except ImportGroupsError as exc:
            _error(str(exc))
            failed = True
    return results, failed


def cmd_check(args: argparse.Namespace) -> int:
    """Report violations; exit non-zero when any are found."""
    if args.stdin:
        try:
            options = merge_overrides(
                resolve_options(Path.cwd(), args.config),
                aliases=args.alias,
                sort_by_full_path=args.by_full_path,
            )
            results = [scan_source(
                sys.stdin.read(), args.filename or "", Configuration.from_options(options)
            )]
        except ImportGroupsError as exc:
            _error(str(exc))
            return config.get_int("exit_codes.error")
        failed = False
    else:
        results, failed = _scan_all(args, write_fix=False)

    stream = sys.stdout if args.format == config.get_str("formats.json") else sys.stderr
    report(results, args.format, stream=stream)

    if failed:
        return config.get_int("exit_codes.error")
    if any(r.diagnostics for r in results):
        return config.get_int("exit_codes.violations")
    return config.get_int("exit_codes.ok")


def cmd_fix(args: argparse.Namespace) -> int:
    """Rewrite every file whose imports are not in canonical form."""
    results, failed = _scan_all(args, write_fix=True)
    for result in results:
        key = "messages.fixed_file" if result.fixed else "messages.unchanged_file"
        sys.stdout.write(config.get_str(key).format(filepath=result.filepath) + "\n")
    return config.get_int("exit_codes.error" if failed else "exit_codes.ok")


def cmd_classify(args: argparse.Namespace) -> int:
    """Print the group of each module path."""
    try:
        options = merge_overrides(resolve_options(Path.cwd(), args.config), aliases=args.alias)
    except ImportGroupsError as exc:
        _error(str(exc))
        return config.get_int("exit_codes.error")
    configuration = Configuration.from_options(options)
    for module_path in args.modules:
        tag = classify(module_path, configuration)
        sys.stdout.write(f"{module_path}\t{tag.value}\n")
    return config.get_int("exit_codes.ok")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", help="Path to an options file (default: nearest "
        f"{config.get_str('filenames.project_config')})",
    )
    parser.add_argument(
        "--alias", action="append", default=[], metavar="PREFIX",
        help="Module prefix that marks an aliased import (repeatable)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the full argparse tree."""
    prog = config.get_str("cli.prog_name")
    fmt_stderr = config.get_str("formats.stderr")
    fmt_json = config.get_str("formats.json")

    parser = argparse.ArgumentParser(prog=prog, description=config.get_str("cli.description"))
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("check", "Report import-group violations"),
        ("fix", "Regroup and sort imports in place"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("paths", nargs="*", help="Files or directories to scan")
        _add_option_flags(sub)
        sub.add_argument(
            "--alphabetical-by-full-path", dest="by_full_path",
            action="store_const", const=True, default=None,
            help="Sort on the whole module path instead of package then member",
        )
        if name == "check":
            sub.add_argument("--stdin", action="store_true", help="Read code from stdin")
            sub.add_argument("--filename", help="Filename to use when reading from stdin")
            sub.add_argument(
                "--format", choices=[fmt_stderr, fmt_json], default=fmt_stderr,
                help="Output format",
            )

    sub_classify = subparsers.add_parser("classify", help="Show the group of module paths")
    sub_classify.add_argument("modules", nargs="+", help="Module specifiers")
    _add_option_flags(sub_classify)

    return parser


def main() -> None:
    """Parse arguments and dispatch to the matching command handler.

    Print help text when no subcommand is given.
    """
    parser = build_parser()
    args = parser.parse_args()

    dispatch = {
        "check": cmd_check,
        "fix": cmd_fix,
        "classify": cmd_classify,
    }

    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return
    if args.command != "classify" and not args.paths and not getattr(args, "stdin", False):
        parser.error("at least one path (or --stdin) is required")
    sys.exit(handler(args))


if __name__ == "__main__":
    main()
