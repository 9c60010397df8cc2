"""Directory and file counts for built folder trees."""

from dataclasses import dataclass

from anytree import PreOrderIter

from foldertree.folder_tree.tree_node import TreeNode


@dataclass(frozen=True)
class TreeStats:
    """Counts of the nodes in a tree.

    Attributes:
        directories: Directory nodes, excluding the root.
        files: Every other node (regular files, unfollowed symlinks, special entries).
    """

    directories: int
    files: int

    def __str__(self) -> str:
        directory_word = "directory" if self.directories == 1 else "directories"
        file_word = "file" if self.files == 1 else "files"
        return f"{self.directories} {directory_word}, {self.files} {file_word}"


def count_nodes(tree: TreeNode) -> TreeStats:
    """Count directories and files below ``tree``.

    Example:
        >>> str(count_nodes(tree))  # doctest: +SKIP
        '2 directories, 5 files'
    """
    directories = 0
    files = 0
    for node in PreOrderIter(tree):
        if node is tree:
            continue
        if node.is_dir:
            directories += 1
        else:
            files += 1
    return TreeStats(directories=directories, files=files)
