"""Unit tests for the TreeNode class."""

import pytest

from foldertree.folder_tree.tree_node import TreeNode
from foldertree.types import NodeType


def test_tree_node_initialization():
    """Test basic initialization of TreeNode."""
    file_node = TreeNode("test_file.txt", full_path="/tmp/test_file.txt")
    assert file_node.name == "test_file.txt"
    assert file_node.full_path == "/tmp/test_file.txt"
    assert file_node.node_type is NodeType.FILE
    assert not file_node.is_dir
    assert file_node.size_bytes is None
    assert not file_node.is_symlink
    assert file_node.symlink_target is None

    dir_node = TreeNode("test_dir", full_path="/tmp/test_dir", node_type=NodeType.DIRECTORY)
    assert dir_node.is_dir
    assert dir_node.children == ()

    symlink_node = TreeNode(
        "test_link -> (symlink)", full_path="/tmp/test_link", is_symlink=True, symlink_target="./target"
    )
    assert not symlink_node.is_dir
    assert symlink_node.is_symlink
    assert symlink_node.symlink_target == "./target"


def test_tree_node_children_keep_order():
    """Children are attached in the order given."""
    children = [TreeNode(name, full_path=f"/r/{name}") for name in ("c", "a", "b")]
    root = TreeNode("r", full_path="/r", node_type=NodeType.DIRECTORY, children=children)

    assert [child.name for child in root.children] == ["c", "a", "b"]
    assert all(child.parent is root for child in root.children)
    assert root.is_root
    assert children[0].depth == 1


def test_tree_node_parent_child():
    """Test parent-child relationships set through the parent argument."""
    root = TreeNode("root", full_path="/root", node_type=NodeType.DIRECTORY)
    child = TreeNode("child", full_path="/root/child", parent=root, node_type=NodeType.DIRECTORY)
    grandchild = TreeNode("leaf", full_path="/root/child/leaf", parent=child, size_bytes=3)

    assert grandchild.parent is child
    assert root.descendants == (child, grandchild)
    assert grandchild.size_bytes == 3


def test_file_node_rejects_children():
    with pytest.raises(ValueError):
        TreeNode("f", full_path="/f", children=[TreeNode("x", full_path="/f/x")])


def test_byte_size_leaves_anytree_attributes_alone():
    """The byte size is stored next to anytree's own node attributes, not over them."""
    root = TreeNode("root", full_path="/root", node_type=NodeType.DIRECTORY)
    TreeNode("a", full_path="/root/a", parent=root, size_bytes=10)
    TreeNode("b", full_path="/root/b", parent=root, size_bytes=20)

    assert [child.size_bytes for child in root.children] == [10, 20]
    assert root.size_bytes is None
    assert root.height == 1
    if hasattr(TreeNode, "size"):
        assert root.size == 3
