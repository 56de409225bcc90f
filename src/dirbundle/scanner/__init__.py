"""Construction of snapshots from real directories.

This module scans a directory on disk, honouring exclusion rules, and freezes
the result into an immutable Dir.
"""

from .directory_scanner import DirectoryScanner, scan_directory
from .permission_action import PermissionAction

__all__ = [
    "DirectoryScanner",
    "PermissionAction",
    "scan_directory",
]
