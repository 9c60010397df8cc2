"""Render directories as tree diagrams.

This package walks a directory into an in-memory tree, applying hidden-file, ignore
pattern, depth and symlink policies, and renders the tree with box-drawing connectors
in the style of the Unix ``tree`` command.

Example:
    >>> from foldertree import build_folder_tree, format_tree
    >>> print(format_tree(build_folder_tree("project"), show_sizes=True))  # doctest: +SKIP
    project
    ├── b
    └── a.txt
"""

from importlib.metadata import PackageNotFoundError, version

from foldertree.exceptions import FolderTreeError, InvalidOptionError, RootNotADirectoryError
from foldertree.exclusion_rules import PatternExclusionRules, should_ignore
from foldertree.folder_tree.tree_builder import FolderTreeBuilder, build_folder_tree
from foldertree.folder_tree.tree_node import TreeNode
from foldertree.folder_tree.tree_renderer import format_size, format_tree, stream_tree
from foldertree.folder_tree.tree_stats import TreeStats, count_nodes
from foldertree.options import DEFAULT_IGNORES, BuildOptions, FormatOptions
from foldertree.types import NodeType, SortOrder

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("foldertree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_IGNORES",
    "BuildOptions",
    "FolderTreeBuilder",
    "FolderTreeError",
    "FormatOptions",
    "InvalidOptionError",
    "NodeType",
    "PatternExclusionRules",
    "RootNotADirectoryError",
    "SortOrder",
    "TreeNode",
    "TreeStats",
    "build_folder_tree",
    "count_nodes",
    "format_size",
    "format_tree",
    "should_ignore",
    "stream_tree",
    "__version__",
]
