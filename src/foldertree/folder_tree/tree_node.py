"""Node representation for entries of a folder tree."""

from typing import Any, Iterable, Optional

from anytree import Node

from foldertree.types import NodeType


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in a built folder tree.

    Extends anytree.Node with the entry's absolute path, its kind and, for regular files,
    an optional byte size. Children order is the final display order chosen by the builder.

    Unfollowed symbolic links and special entries are FILE nodes whose name carries a
    marker suffix, e.g. ``"link -> (symlink)"`` or ``"fifo (special)"``.

    Attributes:
        name (str): Display name of the entry (its base name, plus any marker suffix).
        full_path (str): Absolute path of the entry.
        node_type (NodeType): FILE or DIRECTORY.
        size_bytes (Optional[int]): Byte size for regular files when sizes were collected.
        is_symlink (bool): True for a symbolic link shown without being followed.
        symlink_target (Optional[str]): Raw target of such a link, if it could be read.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("root", full_path="/tmp/root", node_type=NodeType.DIRECTORY)
        >>> child = TreeNode("a.txt", full_path="/tmp/root/a.txt", parent=root, size_bytes=10)
        >>> root.is_dir, child.is_dir
        (True, False)
        >>> child.size_bytes
        10
    """

    def __init__(
        self,
        name: str,
        full_path: str,
        node_type: NodeType = NodeType.FILE,
        parent: Optional["TreeNode"] = None,
        children: Optional[Iterable["TreeNode"]] = None,
        size_bytes: Optional[int] = None,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if children is not None and node_type is not NodeType.DIRECTORY:
            raise ValueError(f"Only directory nodes can have children: {full_path}")

        super().__init__(name, parent=parent, children=children, **kwargs)
        self.full_path = full_path
        self.node_type = node_type
        self.size_bytes = size_bytes
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.DIRECTORY
