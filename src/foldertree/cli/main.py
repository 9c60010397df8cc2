"""Command-line interface for foldertree.

This module wires argument parsing to the folder tree builder and renderer and maps
failures to exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error (missing root, root is not a directory, filesystem error)
    2: Command-line syntax error
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Render the current directory
    $ foldertree

    # Render two levels of a project with file sizes
    $ foldertree -d 2 -s /path/to/project
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from foldertree.cli.argparser import create_parser, validate_args
from foldertree.folder_tree.tree_builder import build_folder_tree
from foldertree.folder_tree.tree_renderer import format_tree
from foldertree.folder_tree.tree_stats import count_nodes
from foldertree.options import BuildOptions, FormatOptions

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_options_from_args(args: argparse.Namespace) -> BuildOptions:
    return BuildOptions(
        max_depth=args.max_depth,
        include_hidden=args.hidden,
        follow_symlinks=args.follow_symlinks,
        include_sizes=args.sizes,
        ignore=args.ignore,
        sort=args.sort,
    )


def format_options_from_args(args: argparse.Namespace) -> FormatOptions:
    return FormatOptions(
        show_full_path=args.full_path,
        show_sizes=args.sizes,
        indent=" " * args.indent,
    )


def render(args: argparse.Namespace) -> str:
    """Build and render the tree described by the parsed arguments."""
    tree = build_folder_tree(args.directory, build_options_from_args(args))
    text = format_tree(tree, format_options_from_args(args))
    if args.summary:
        text += f"\n\n{count_nodes(tree)}"
    return text


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the foldertree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)
        text = render(args)

        if args.output:
            args.output.write_text(text + "\n", encoding="utf-8")
            logger.info("Wrote tree to %s", args.output)
        else:
            sys.stdout.write(text + "\n")
            sys.stdout.flush()

    except BrokenPipeError:
        # Keep the interpreter from reporting the closed pipe again while flushing at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
