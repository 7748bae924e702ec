"""Command-line entrypoint: pick a package.json task and run it.

Usage:
  jsrun [PATH] [--config FILE] [--json] [--dry-run] [--verbose]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .core import build_catalog, execution_request
from .discovery import starting_directory
from .executor import ExecutionError, SubprocessExecutor, run_selection
from .logging import configure_logging
from .selector import PromptSelector
from .settings import ConfigError, load_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsrun",
        description="Run package.json scripts and package manager commands.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Active file or directory to start from (default: current directory)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a settings file")
    parser.add_argument("--json", action="store_true", help="Print the task catalog as JSON and exit")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the selected command instead of running it"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    catalog = build_catalog(starting_directory(args.path), settings)

    if args.json:
        print(json.dumps(catalog.to_dict(), indent=2))
        return 0

    selector = PromptSelector()

    if args.dry_run:
        selection = selector.select(catalog)
        if selection is not None:
            request = execution_request(selection.source, selection.item)
            print(f"{request.command}  (in {request.directory})")
        return 0

    try:
        status = run_selection(catalog, selector, SubprocessExecutor())
    except ExecutionError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0 if status is None else status


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
