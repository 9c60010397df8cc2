from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeType(Enum):
    """Enumeration of node kinds in a built folder tree.

    Symbolic links that are not followed and special entries (FIFOs, sockets,
    devices) are represented as FILE nodes, so they are never expanded.

    Attributes:
        FILE: Regular file or any other terminal entry
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"


class SortOrder(str, Enum):
    """Ordering policy applied to the entries of every directory.

    Values:
        DIRS_FIRST: Directories before everything else, then by name (default)
        NAME: By name only, ignoring the entry type
    """

    DIRS_FIRST = "dirs-first"
    NAME = "name"
