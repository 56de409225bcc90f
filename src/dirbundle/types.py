from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of the kinds of entries stored in a snapshot.

    This enum is used to tell apart the two variants a DirEntry can wrap when
    iterating over a snapshot.

    Attributes:
        FILE: Regular file with byte contents
        DIRECTORY: Directory with child files and subdirectories
    """

    FILE = "file"
    DIRECTORY = "directory"
