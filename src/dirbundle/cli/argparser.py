"""Command-line argument parsing for dirbundle.

This module defines the command-line interface for dirbundle, handling argument
parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirbundle import __version__
from dirbundle.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, preserving the order in which -e/--exclude files and -i/--ignore
    patterns appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(values if isinstance(values, (str, os.PathLike)) else Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object that `pack` populates during parsing.

    Returns:
        An ArgumentParser instance configured with dirbundle's subcommands.
    """
    description = """
    dirbundle: Immutable directory snapshots you can ship with a program.

    A snapshot captures a directory's files (with their bytes) and subdirectories in a
    single JSON bundle. Bundles can be listed, searched with glob patterns, read, and
    extracted back onto disk without access to the original directory.
    """

    epilog = """
    Examples:
      # Snapshot a directory into a bundle
      dirbundle pack ./assets -o assets.json

      # Leave files out using gitignore-style rules
      dirbundle pack ./assets -e .gitignore -i "*.tmp" -i "cache/" -o assets.json

      # List every entry, or only entries matching a glob
      dirbundle ls assets.json
      dirbundle ls assets.json "images/**/*.png"

      # Show the snapshot as a tree
      dirbundle tree assets.json

      # Print one file's bytes
      dirbundle cat assets.json templates/index.html

      # Recreate the snapshot (or one of its directories) on disk
      dirbundle extract assets.json ./out
      dirbundle extract assets.json ./out -d templates
    """

    parser = argparse.ArgumentParser(
        prog="dirbundle",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"dirbundle {__version__}", help="Show the version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    ExclusionAction = create_exclusion_action(exclusion_rules)

    pack = subparsers.add_parser("pack", help="Snapshot a directory into a bundle.")
    pack.add_argument("directory", type=Path, help="The directory to snapshot.")
    pack.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Bundle file to write. If not specified, the bundle is written to stdout.",
    )
    pack.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to exclusion file (e.g., .gitignore) (can be specified multiple times).",
    )
    pack.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude files and directories (can be specified "
            "multiple times; processed in order together with -e/--exclude)."
        ),
    )
    pack.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Capture the targets of symbolic links. By default, symlinks are left out.",
    )
    pack.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "fail"],
        default="ignore",
        help="How to handle unreadable entries (default: ignore).",
    )
    pack.add_argument("--indent", type=int, metavar="N", help="Pretty-print the bundle with N spaces.")

    ls = subparsers.add_parser("ls", help="List the entries of a bundle.")
    ls.add_argument("bundle", type=Path, help="The bundle to read.")
    ls.add_argument("pattern", nargs="?", help="Glob pattern matched against full entry paths.")

    tree = subparsers.add_parser("tree", help="Show a bundle as a tree.")
    tree.add_argument("bundle", type=Path, help="The bundle to read.")

    cat = subparsers.add_parser("cat", help="Write one file of a bundle to stdout.")
    cat.add_argument("bundle", type=Path, help="The bundle to read.")
    cat.add_argument("path", help="Path of the file inside the bundle.")

    extract = subparsers.add_parser("extract", help="Recreate a bundle on disk.")
    extract.add_argument("bundle", type=Path, help="The bundle to read.")
    extract.add_argument("target", type=Path, help="Destination directory (created if missing).")
    extract.add_argument(
        "-d",
        "--dir",
        metavar="PATH",
        help="Extract only this directory of the bundle.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.command == "pack" and args.indent is not None and args.indent < 0:
        raise ValueError("--indent must not be negative")
    if args.command == "extract" and args.target.exists() and not args.target.is_dir():
        raise ValueError(f"Extraction target is not a directory: {args.target}")
