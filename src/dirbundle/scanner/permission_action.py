"""Permission action enum for handling permission errors while scanning."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry cannot be read during a scan.

    Values:
        IGNORE: Leave unreadable files and directory listings out of the snapshot (default behavior)
        RAISE: Propagate the PermissionError and abort the scan
    """

    IGNORE = "ignore"
    RAISE = "raise"
