"""Command-line argument parsing for foldertree.

This module defines the command-line interface for foldertree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from foldertree import __version__
from foldertree.exclusion_rules.pattern_rules import match_at_any_depth, read_rules_file
from foldertree.types import SortOrder


class IgnorePatternsAction(argparse.Action):
    """Action collecting ignore patterns into a single ordered list.

    ``-i/--ignore`` takes a comma-separated list of patterns and ``-e/--exclude`` takes
    a file with one pattern per line. Both may be repeated; patterns end up in
    ``namespace.ignore`` in the order they appear on the command line.

    Globs from ``-i`` are matched against the whole relative path. Lines read with ``-e``
    keep their ignore-file meaning, so a line without an inner slash applies at any depth.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if getattr(namespace, "ignore", None) is None:
            namespace.ignore = []

        if values is None:
            return

        if option_string in ("-e", "--exclude"):
            try:
                patterns = [match_at_any_depth(line) for line in read_rules_file(str(values))]
            except (FileNotFoundError, UnicodeDecodeError) as e:
                parser.error(str(e))
        else:  # -i/--ignore
            patterns = split_patterns(str(values))

        namespace.ignore.extend(patterns)


def split_patterns(value: str) -> List[str]:
    """Split a comma-separated pattern list, dropping empty items.

    Example:
        >>> split_patterns("*.log, dist/**,,")
        ['*.log', 'dist/**']
    """
    return [pattern.strip() for pattern in value.split(",") if pattern.strip()]


def non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with foldertree's options.
    """
    description = """
    foldertree: print a directory as a tree diagram.

    Walks DIRECTORY recursively and prints its structure with box-drawing connectors,
    similar to the Unix `tree` command. Hidden entries and common build, dependency and
    version-control directories are left out unless requested otherwise.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      foldertree

      # Two levels deep, with file sizes
      foldertree -d 2 --sizes /path/to/project

      # Include hidden entries and follow symbolic links
      foldertree -a -L /path/to/project

      # Replace the default ignore list with custom patterns
      foldertree -i "**/__pycache__/**,*.pyc" /path/to/project

      # Load ignore patterns from a file
      foldertree -e .gitignore /path/to/project

      # Sort purely by name and show absolute paths
      foldertree --sort name --full-path /path/to/project

      # Write to a file and append a summary line
      foldertree --summary -o tree.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="foldertree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"foldertree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: the current directory).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=non_negative_int,
        metavar="N",
        help="Do not expand directories N or more levels below the root.",
    )
    parser.add_argument(
        "-a",
        "--hidden",
        action="store_true",
        help="Include entries whose name starts with a dot.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. By default they are shown as links and never traversed.",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        action="store_true",
        help="Show the size of regular files.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERNS",
        action=IgnorePatternsAction,
        help=(
            "Comma-separated glob patterns to exclude, matched against paths relative to DIRECTORY "
            "(can be specified multiple times). Replaces the default ignore list."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="FILE",
        action=IgnorePatternsAction,
        dest="ignore",
        help="File with one ignore pattern per line (can be specified multiple times). Replaces the default list.",
    )
    parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        default=SortOrder.DIRS_FIRST.value,
        help="Ordering of entries within each directory (default: dirs-first).",
    )
    parser.add_argument(
        "-f",
        "--full-path",
        action="store_true",
        help="Label entries with their absolute path.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        metavar="N",
        help="Width of each nesting level (default: 4).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Append a line with the number of directories and files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log traversal decisions to stderr.",
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
    if args.indent < 1:
        raise ValueError("--indent must be at least 1")
