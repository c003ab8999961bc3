"""
cli_entry.py - CLI Entry Point

Validates the invocation, then hands a ready-made strategy config to the
core engine and prints what it renamed (or would rename).

Exit codes: 0 on success (no-op and dry run included), 1 on validation,
plan or execution errors, 2 on usage errors reported by argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core import (
    Mode, RenameRun, RenamerError, PlanConflict, StrategyConfig, FindReplaceConfig,
    config_for_mode, check_directory, check_writable,
)


def non_negative_int(value: str) -> int:
    """argparse type for --start/--pad"""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if num < 0:
        raise argparse.ArgumentTypeError(f"value cannot be less than 0: {num}")
    return num


def create_parser(prog: str = "bulk-renamer") -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Rename the files of one directory in bulk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  seq       Sequential numbering (001-file.jpg, 002-file.jpg, ...)
  date      Date prefix from file mtime (2024-01-15-file.jpg)
  replace   Find/replace in filenames
  lower     Lowercase all filenames

Examples:
  bulk-renamer --mode seq --dir ./photos --start 10 --pad 4
  bulk-renamer --mode replace --dir ./docs --find draft- --replace final-
  bulk-renamer --mode lower --dir ./photos --dry-run
"""
    )

    parser.add_argument("--mode", "-m", required=True,
                        choices=[m.value for m in Mode], help="Rename mode")
    parser.add_argument("--dir", "-d", type=str, default=".",
                        help="Target directory (default: current directory)")
    parser.add_argument("--dry-run", "-n", action="store_true",
                        help="Preview changes without renaming")
    parser.add_argument("--find", type=str, default="",
                        help="Substring to find (required for replace mode)")
    parser.add_argument("--replace", type=str, default="",
                        help="Replacement string (required for replace mode)")
    parser.add_argument("--start", type=non_negative_int, default=1,
                        help="Starting number for seq mode (default: 1)")
    parser.add_argument("--pad", type=non_negative_int, default=3,
                        help="Zero-padding width for seq mode (default: 3)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log engine details to stderr")

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send engine logs to stderr; user-facing lines go to stdout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def validate_args(args: argparse.Namespace, dry_run: bool) -> Optional[str]:
    """
    Validate arguments the parser cannot check on its own

    Returns:
        Error message, or None when the invocation is valid
    """
    directory = Path(args.dir)
    valid, error = check_directory(directory)
    if not valid:
        return error

    if args.mode == Mode.REPLACE.value:
        if not args.find:
            return "--find is required for replace mode"
        if not args.replace:
            return "--replace is required for replace mode"

    if not dry_run:
        valid, error = check_writable(directory)
        if not valid:
            return error

    return None


def no_op_message(config: StrategyConfig) -> str:
    """Informational line printed when nothing needs renaming"""
    if isinstance(config, FindReplaceConfig):
        return f"(no files matching '{config.find}' to rename)"
    return "(no files to rename)"


def print_errors(errors: List[str]) -> None:
    print("Errors:", file=sys.stderr)
    for err in errors:
        print(f"  - {err}", file=sys.stderr)


def run(args: argparse.Namespace, dry_run: bool) -> int:
    """Run one rename invocation, return the exit code"""
    error = validate_args(args, dry_run)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    directory = Path(args.dir)
    config = config_for_mode(
        Mode(args.mode),
        start=args.start,
        pad=args.pad,
        find=args.find,
        replace=args.replace,
    )

    if dry_run:
        print(f"[DRY RUN] Previewing changes in: {directory}")
    else:
        print(f"Renaming files in: {directory}")

    rename_run = RenameRun(directory, config)

    try:
        rename_run.scan()
        plan = rename_run.build()
        report = rename_run.execute(dry_run=dry_run, line_callback=print)
    except PlanConflict as e:
        print_errors(e.errors)
        return 1
    except RenamerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if report.renamed_count == 0:
        print(no_op_message(config))

    # Conflicting plans can be previewed but never count as success
    if plan.errors:
        print_errors(list(plan.errors))
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return run(args, dry_run=args.dry_run)


def preview_main(argv: Optional[List[str]] = None) -> int:
    """Preview entry point: same options, --dry-run always on"""
    parser = create_parser(prog="bulk-renamer-preview")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return run(args, dry_run=True)


if __name__ == "__main__":
    sys.exit(main())
