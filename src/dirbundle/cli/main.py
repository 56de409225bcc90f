"""Command-line interface for dirbundle.

This module provides the `dirbundle` command, which snapshots directories into
JSON bundles and lists, searches, reads and extracts existing bundles.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including invalid glob patterns)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Snapshot a directory, then list its Python files
    $ dirbundle pack ./project -i "__pycache__/" -o project.json
    $ dirbundle ls project.json "**/*.py"
"""

import argparse
import sys
from typing import Callable, Dict, Iterable, Iterator, Union

from dirbundle import bundle
from dirbundle.cli.argparser import create_parser, validate_args
from dirbundle.cli.safe_writer import SafeWriter
from dirbundle.cli.signal_handler import setup_signal_handling, signal_handler
from dirbundle.exceptions import PatternError
from dirbundle.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirbundle.scanner.directory_scanner import scan_directory
from dirbundle.scanner.permission_action import PermissionAction
from dirbundle.tree.dir import Dir
from dirbundle.tree.dir_entry import DirEntry
from dirbundle.tree.render import render_tree

Output = Iterable[Union[str, bytes]]


def read_bundle(args: argparse.Namespace) -> Dir:
    """Load the bundle named by the parsed arguments."""
    with open(args.bundle, "r", encoding="utf-8") as f:
        return bundle.load(f)


def format_entry(entry: DirEntry) -> str:
    """Format an entry for listing; directories end with a slash."""
    return f"{entry.path}/\n" if entry.is_dir() else f"{entry.path}\n"


def run_pack(args: argparse.Namespace, exclusion_rules: GitIgnoreExclusionRules) -> Output:
    snapshot = scan_directory(
        args.directory,
        exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
        permission_action=PermissionAction.RAISE if args.permission_action == "fail" else PermissionAction.IGNORE,
        follow_symlinks=args.follow_symlinks,
    )
    return [bundle.dumps(snapshot, indent=args.indent) + "\n"]


def run_ls(args: argparse.Namespace) -> Output:
    snapshot = read_bundle(args)
    # Compile before producing any output so a bad pattern fails cleanly
    entries: Iterator[DirEntry] = snapshot.find(args.pattern) if args.pattern else snapshot.walk()
    return (format_entry(entry) for entry in entries if entry.path)


def run_tree(args: argparse.Namespace) -> Output:
    snapshot = read_bundle(args)
    return (f"{line}\n" for line in render_tree(snapshot))


def run_cat(args: argparse.Namespace) -> Output:
    snapshot = read_bundle(args)
    file = snapshot.get_file(args.path)
    if file is None:
        raise FileNotFoundError(f"No such file in bundle: {args.path}")
    return [file.contents]


def run_extract(args: argparse.Namespace) -> Output:
    snapshot = read_bundle(args)
    if args.dir:
        subdirectory = snapshot.get_dir(args.dir)
        if subdirectory is None:
            raise FileNotFoundError(f"No such directory in bundle: {args.dir}")
        snapshot = subdirectory
    snapshot.extract(args.target)
    return []


def main() -> None:
    """Main entry point for the dirbundle command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by -e/--exclude and -i/--ignore while parsing
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        commands: Dict[str, Callable[[argparse.Namespace], Output]] = {
            "pack": lambda a: run_pack(a, exclusion_rules),
            "ls": run_ls,
            "tree": run_tree,
            "cat": run_cat,
            "extract": run_extract,
        }
        output = commands[args.command](args)

        output_file = args.output if args.command == "pack" and args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                for chunk in output:
                    safe_writer.write(chunk)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except PatternError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
