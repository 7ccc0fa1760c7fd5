"""Command line front end: resolve a project's runtime and print it as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .errors import DnxPathsError
from .runtime import ResolutionRequest, resolve_dnx_paths
from .runtime.types import DnxPaths
from .utils import HostEnvironment

LOG_LEVEL_ENV = "DNXPATHS_LOG_LEVEL"
LOG_LEVELS = ("debug", "info", "warning", "error")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2


def configure_logging(level: str) -> None:
    """Send dnxpaths log records to stderr at the given level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    package_logger = logging.getLogger("dnxpaths")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level.upper())
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dnxpaths",
        description="Locate the installed DNX runtime and tools for a project",
    )
    parser.add_argument(
        "project_path",
        nargs="?",
        default=None,
        help="Project directory (default: $DNXPATHS_PROJECT_PATH or the current directory)",
    )
    parser.add_argument(
        "--alias",
        default=None,
        help="Runtime alias or version to use when global.json does not pin one",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=os.getenv(LOG_LEVEL_ENV, "warning").lower(),
        help="Logging verbosity (default: $DNXPATHS_LOG_LEVEL or warning)",
    )
    return parser


def format_diagnostic(paths: DnxPaths) -> Optional[str]:
    """Render a not-found error as a ``file(line,column): error: ...`` line."""
    error = paths.runtime_path.error
    if error is None or error.source_file is None:
        return None
    first_line = error.message.splitlines()[0]
    return f"{error.source_file}({error.source_line},{error.source_column}): error: {first_line}"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Returns:
        0 when the runtime was found, 1 when it was not, 2 on a fatal
        configuration error
    """
    args = build_parser().parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        args.log_level = "warning"
    configure_logging(args.log_level)

    environment = HostEnvironment.from_os(args.project_path)
    config = load_config(environment.path)
    request = ResolutionRequest(
        start_directory=environment.path,
        configured_alias=args.alias or config.aspnet5.alias,
    )

    try:
        paths = resolve_dnx_paths(environment, config, request)
    except DnxPathsError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print(json.dumps(paths.to_dict(), indent=2))

    diagnostic = format_diagnostic(paths)
    if diagnostic:
        print(diagnostic, file=sys.stderr)

    return EXIT_OK if paths.runtime_path.ok else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
