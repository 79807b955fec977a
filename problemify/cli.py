"""
Command-line entry point.

Usage:
    python -m problemify --problem exercises/week1
    python -m problemify -s /abs/path/to/exercise
    python -m problemify --problem . --dry-run
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from problemify import __version__
from problemify.errors import ExitCode, FilesystemError, UsageError
from problemify.markers import Mode
from problemify.processor import FileAction
from problemify.runner import resolve_root, run
from problemify.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

STATUS_VERBS = {
    Mode.PROBLEM: "Problemifying",
    Mode.SOLUTION: "Solutionifying",
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="problemify",
        allow_abbrev=False,
        description="Turn an annotated source tree into its problem or solution variant, in place",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Markers:
    // START SOLUTION ... // END SOLUTION     removed in problem mode
    /* START PROBLEM ... END PROBLEM */       removed in solution mode
    /* SOLUTION FILE */ (first line)          file deleted in problem mode
    /* PROBLEM FILE */ (first line)           file deleted in solution mode

Files are modified destructively. Commit or copy the tree first.
        """,
    )
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument(
        "-p",
        "--problem",
        dest="mode",
        action="store_const",
        const=Mode.PROBLEM,
        help="Produce the problem (exercise) variant",
    )
    mode_group.add_argument(
        "-s",
        "--solution",
        dest="mode",
        action="store_const",
        const=Mode.SOLUTION,
        help="Produce the solution variant",
    )
    parser.add_argument(
        "path",
        help="Root directory to transform (relative to the working directory or absolute)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be deleted or rewritten without touching files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every processed file to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()

    try:
        parsed = parser.parse_args(args)
        if not parsed.path:
            raise UsageError("path must not be empty", param_name="path", received=parsed.path)
    except UsageError as e:
        parser.print_help(sys.stderr)
        print(f"\nError: {e.message}", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    configure_logging(log_level="DEBUG" if parsed.verbose else None)

    mode: Mode = parsed.mode
    root = resolve_root(parsed.path)
    print(f"{STATUS_VERBS[mode]} {root}")

    try:
        report = run(root, mode, dry_run=parsed.dry_run)
    except FilesystemError as e:
        logger.error("run_aborted", **e.to_dict(), exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return e.exit_code

    if parsed.dry_run:
        for result in report.results:
            verb = "delete" if result.action is FileAction.DELETED else "rewrite"
            print(f"{verb} {result.path}")

    return ExitCode.OK


if __name__ == "__main__":
    raise SystemExit(main())
