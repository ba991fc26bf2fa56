"""
Command-line interface for the directory organizer.

Handles argument parsing, validates the source directory and prints the
run summary.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CATEGORIES, DEFAULT_FALLBACK_CATEGORY, MODE_TYPE, VALID_MODES, OrganizerConfig
from .errors import OrganizerError
from .operations import OrganizeReport, OutputCallback, _default_output, organize
from .utils import NO_EXTENSION_FOLDER


def _category_help() -> str:
    lines = []
    for category, extensions in DEFAULT_CATEGORIES.items():
        names = ", ".join(sorted(ext.lstrip(".") for ext in extensions))
        lines.append(f"  {category:<10} - {names}")
    lines.append(f"  {DEFAULT_FALLBACK_CATEGORY:<10} - everything else")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="dirsort",
        description="Organize files into subfolders by type, date or extension",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Organize methods:
  type       - category folders (see below)
  date       - one folder per modification month, e.g. 2024-03
  extension  - one folder per raw extension, e.g. pdf ({NO_EXTENSION_FOLDER} if none)

Categories:
{_category_help()}

Name conflicts:
  Existing files are never overwritten; report.pdf becomes report_1.pdf, report_2.pdf, ...
  Use --dry-run to preview changes before applying.
        """
    )

    parser.add_argument(
        "--source",
        type=str,
        default=".",
        help="Directory to organize (default: current directory)"
    )

    parser.add_argument(
        "--target",
        type=str,
        default="./organized",
        help="Directory to create the subfolders in (default: ./organized)"
    )

    parser.add_argument(
        "--by",
        choices=VALID_MODES,
        default=MODE_TYPE,
        help="Organize by: type, date, or extension (default: type)"
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Preview changes without moving files"
    )

    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Process subdirectories recursively"
    )

    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first file that cannot be read or moved"
    )

    return parser


def print_summary(report: OrganizeReport, output: OutputCallback = _default_output) -> None:
    """Print the moved/skipped totals for a finished run."""
    output("\n--- Summary ---")
    output(f"Files moved: {report.moved_count}")
    output(f"Files skipped: {report.skipped_count}")
    output(f"Total processed: {report.total_processed}")
    if report.warnings:
        output(f"Warnings: {len(report.warnings)}")


def run(
    args: argparse.Namespace,
    output: OutputCallback = _default_output,
) -> int:
    """
    Run the directory organizer with the given arguments.

    Args:
        args: Parsed command-line arguments
        output: Callback for output messages

    Returns:
        Exit code (0 for success, 1 for error)
    """
    source = Path(args.source).expanduser().resolve()
    target = Path(args.target).expanduser().resolve()

    if not source.is_dir():
        print(f"Error: source directory does not exist: {source}", file=sys.stderr)
        return 1

    try:
        config = OrganizerConfig(
            source=source,
            target=target,
            mode=args.by,
            dry_run=args.dry_run,
            recursive=args.recursive,
            fail_fast=args.fail_fast,
        )
        report = organize(config, output=output)
    except OrganizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(report, output=output)
    if args.dry_run:
        output("Run without --dry-run to apply changes.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
