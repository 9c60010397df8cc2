"""Text rendering of folder trees using box-drawing connectors."""

import dataclasses
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterator, Optional

from foldertree.folder_tree.tree_node import TreeNode
from foldertree.options import FormatOptions

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│"

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Format a byte count with a binary (1024-based) unit.

    Bytes are shown as an integer, larger units with exactly one decimal digit,
    rounded half up.

    Example:
        >>> format_size(512)
        '512 B'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(1073741824)
        '1.0 GB'
    """
    size = Decimal(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        rounded = size.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    else:
        rounded = size.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded} {SIZE_UNITS[unit_index]}"


def node_label(node: TreeNode, options: FormatOptions) -> str:
    """Return the text shown for a node, without any connector."""
    label = node.full_path if options.show_full_path else node.name
    if options.show_sizes and not node.is_dir and node.size_bytes is not None:
        return f"{label} ({format_size(node.size_bytes)})"
    return label


def stream_tree(node: TreeNode, options: Optional[FormatOptions] = None) -> Iterator[str]:
    """Generate the tree diagram one line at a time.

    The root label comes first with no connector. Every other line is the accumulated
    prefix, a connector, and the node label. Below a node that has later siblings the
    prefix carries a vertical bar; below a last sibling it carries blank space.

    Yields:
        Lines of the diagram, without line terminators.

    Example:
        >>> for line in stream_tree(tree):  # doctest: +SKIP
        ...     print(line)
        project
        ├── src
        │   └── main.py
        └── README.md
    """
    if options is None:
        options = FormatOptions()

    yield node_label(node, options)
    yield from _stream_children(node, "", options)


def _stream_children(node: TreeNode, prefix: str, options: FormatOptions) -> Iterator[str]:
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        is_last = index == last_index
        connector = LAST_BRANCH if is_last else BRANCH
        yield f"{prefix}{connector}{node_label(child, options)}"

        if child.is_dir:
            if is_last:
                extension = options.indent
            else:
                extension = VERTICAL + options.indent[:-1]
            yield from _stream_children(child, prefix + extension, options)


def format_tree(node: TreeNode, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
    """Render a complete tree diagram as a single string.

    Args:
        node: Root of a built tree.
        options: Formatting configuration. Defaults to FormatOptions().
        **overrides: FormatOptions fields replacing those of ``options``.

    Returns:
        The lines of the diagram joined with newlines, without a trailing newline.
    """
    if options is None:
        options = FormatOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)
    return "\n".join(stream_tree(node, options))
