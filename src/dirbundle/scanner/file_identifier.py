"""Identity of directories on disk, used to detect symlink loops while scanning."""

from pathlib import Path
from typing import Any, Optional


class FileIdentifier:
    """Identifies a file or directory by its device and inode.

    When symlinks are followed, two different paths can lead to the same directory.
    Tracking the (device, inode) pairs of the directories on the current branch lets
    the scanner notice when a link points back at one of its own ancestors.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def of(cls, path: Path) -> Optional["FileIdentifier"]:
        """Build the identifier of the entry a path resolves to.

        Args:
            path: Path to stat, following symlinks.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = path.stat()
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
