"""Recursive directory walker producing folder trees.

The walk is depth-first and strictly sequential: each directory is listed, filtered and
sorted, then every remaining entry is resolved completely (including its whole subtree)
before the next sibling is visited. Any ``OSError`` raised while listing or inspecting
an entry aborts the build; no partial tree is ever returned.
"""

import dataclasses
import logging
import os
import stat
from typing import AbstractSet, Any, Optional, Tuple

from foldertree.exceptions import RootNotADirectoryError
from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.pattern_rules import PatternExclusionRules
from foldertree.folder_tree.file_identifier import FileIdentifier
from foldertree.folder_tree.tree_node import TreeNode
from foldertree.options import BuildOptions
from foldertree.types import NodeType, PathType, SortOrder

logger = logging.getLogger(__name__)

SYMLINK_SUFFIX = " -> (symlink)"
SYMLINK_LOOP_SUFFIX = " -> (symlink loop)"
SPECIAL_SUFFIX = " (special)"


def name_sort_key(name: str) -> Tuple[str, str]:
    """Sort key comparing names case-insensitively first, lowercase before uppercase on ties.

    This gives a dictionary-like order (``a``, ``A``, ``b``, ``B``) that does not depend
    on the process locale.

    Example:
        >>> sorted(["b", "B", "a", "A"], key=name_sort_key)
        ['a', 'A', 'b', 'B']
    """
    return (name.casefold(), name.swapcase())


class FolderTreeBuilder:
    """Builds a TreeNode snapshot of a directory.

    Attributes:
        options (BuildOptions): Walk configuration.
        exclusion_rules (BaseExclusionRules): Rules consulted for every listed entry.
            Defaults to PatternExclusionRules built from ``options.ignore``.

    Example:
        >>> builder = FolderTreeBuilder(BuildOptions(max_depth=1))  # doctest: +SKIP
        >>> tree = builder.build("src")  # doctest: +SKIP
        >>> [child.name for child in tree.children]  # doctest: +SKIP
        ['foldertree']
    """

    def __init__(
        self,
        options: Optional[BuildOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.options = options if options is not None else BuildOptions()
        if exclusion_rules is None:
            exclusion_rules = PatternExclusionRules(self.options.ignore)
        self.exclusion_rules = exclusion_rules

    def build(self, root_path: PathType) -> TreeNode:
        """Walk ``root_path`` and return the root directory node.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
            OSError: If any directory below the root cannot be listed or inspected.
        """
        root = os.path.abspath(os.fspath(root_path))
        root_stat = os.stat(root)
        if not stat.S_ISDIR(root_stat.st_mode):
            raise RootNotADirectoryError(root)

        logger.info("Building folder tree for %s", root)
        name = os.path.basename(root) or root
        return self._build_directory(root, root, name, 0, frozenset(), root_stat)

    def _build_directory(
        self,
        root: str,
        path: str,
        name: str,
        depth: int,
        ancestors: AbstractSet[FileIdentifier],
        dir_stat: os.stat_result,
    ) -> TreeNode:
        max_depth = self.options.max_depth
        if max_depth is not None and depth >= max_depth:
            logger.debug("Not expanding %s: depth %d reaches max_depth %d", path, depth, max_depth)
            return TreeNode(name, full_path=path, node_type=NodeType.DIRECTORY)

        if self.options.follow_symlinks:
            ancestors = ancestors | {FileIdentifier.from_stat(dir_stat)}

        with os.scandir(path) as it:
            entries = [entry for entry in it if self._is_included(root, entry)]
        entries.sort(key=self._sort_key)

        children = [self._build_entry(root, entry, depth + 1, ancestors) for entry in entries]
        return TreeNode(name, full_path=path, node_type=NodeType.DIRECTORY, children=children)

    def _is_included(self, root: str, entry: "os.DirEntry[str]") -> bool:
        if not self.options.include_hidden and entry.name.startswith("."):
            return False

        relative_path = os.path.relpath(entry.path, root).replace(os.sep, "/")
        if self.exclusion_rules.exclude(relative_path):
            logger.debug("Ignoring %s", relative_path)
            return False
        return True

    def _sort_key(self, entry: "os.DirEntry[str]") -> Tuple[Any, ...]:
        if self.options.sort is SortOrder.DIRS_FIRST:
            is_dir = entry.is_dir(follow_symlinks=self.options.follow_symlinks)
            return (not is_dir,) + name_sort_key(entry.name)
        return name_sort_key(entry.name)

    def _build_entry(
        self,
        root: str,
        entry: "os.DirEntry[str]",
        depth: int,
        ancestors: AbstractSet[FileIdentifier],
    ) -> TreeNode:
        if entry.is_symlink():
            if not self.options.follow_symlinks:
                logger.debug("Not following symlink %s", entry.path)
                return self._symlink_node(entry, SYMLINK_SUFFIX)
            entry_stat = entry.stat(follow_symlinks=True)
        else:
            entry_stat = entry.stat(follow_symlinks=False)

        if stat.S_ISDIR(entry_stat.st_mode):
            if FileIdentifier.from_stat(entry_stat) in ancestors:
                logger.debug("Symlink loop at %s", entry.path)
                return self._symlink_node(entry, SYMLINK_LOOP_SUFFIX)
            return self._build_directory(root, entry.path, entry.name, depth, ancestors, entry_stat)

        if stat.S_ISREG(entry_stat.st_mode):
            size = entry_stat.st_size if self.options.include_sizes else None
            return TreeNode(entry.name, full_path=entry.path, size_bytes=size)

        return TreeNode(entry.name + SPECIAL_SUFFIX, full_path=entry.path)

    @staticmethod
    def _symlink_node(entry: "os.DirEntry[str]", suffix: str) -> TreeNode:
        try:
            target: Optional[str] = os.readlink(entry.path)
        except OSError:
            # The node is still shown; only the informational target is missing
            target = None
        return TreeNode(entry.name + suffix, full_path=entry.path, is_symlink=True, symlink_target=target)


def build_folder_tree(root_path: PathType, options: Optional[BuildOptions] = None, **overrides: Any) -> TreeNode:
    """Build the folder tree rooted at ``root_path``.

    Args:
        root_path: Directory to walk. Relative paths are resolved against the current
            working directory.
        options: Walk configuration. Defaults to BuildOptions().
        **overrides: BuildOptions fields replacing those of ``options``.

    Returns:
        The root directory node.

    Raises:
        FileNotFoundError: If the root path doesn't exist.
        RootNotADirectoryError: If the root path isn't a directory.
        OSError: If the walk fails below the root.

    Example:
        >>> tree = build_folder_tree("project", include_sizes=True)  # doctest: +SKIP
        >>> tree.name  # doctest: +SKIP
        'project'
    """
    if options is None:
        options = BuildOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)
    return FolderTreeBuilder(options).build(root_path)
