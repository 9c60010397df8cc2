"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import Any


class FileIdentifier:
    """Identity of a file or directory as a (device, inode) pair.

    Used while following symbolic links: a link that resolves to a directory already on
    the current descent path would otherwise be expanded forever.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        """Create an identifier from the result of ``os.stat``."""
        return cls(stat_result.st_dev, stat_result.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
