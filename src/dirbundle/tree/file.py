"""Leaf node of a snapshot: a relative path plus immutable byte contents."""

from typing import Any, Optional

from dirbundle.tree.path import base_name, normalize_path
from dirbundle.types import PathType


class File:
    """A file stored in a snapshot.

    Files are immutable value objects. The path is normalized on construction and
    the contents are stored as ``bytes``, so a File can be shared freely between
    directories, iterators and threads.

    Attributes:
        path (str): Path relative to the snapshot root, using ``/`` as separator.
        contents (bytes): The raw file contents.

    Example:
        >>> readme = File("docs/README.md", b"# Project")
        >>> readme.path
        'docs/README.md'
        >>> readme.name
        'README.md'
        >>> readme.contents_utf8()
        '# Project'
    """

    __slots__ = ("_path", "_contents")

    def __init__(self, path: PathType, contents: bytes = b"") -> None:
        """Initialize a File.

        Args:
            path: Path relative to the snapshot root. Can be any path-like object.
            contents: The raw file contents. Any bytes-like object is copied into an
                immutable ``bytes`` value. Defaults to empty.
        """
        self._path = normalize_path(path)
        self._contents = bytes(contents)

    @property
    def path(self) -> str:
        """The normalized path relative to the snapshot root."""
        return self._path

    @property
    def name(self) -> str:
        """The last segment of the path."""
        return base_name(self._path)

    @property
    def contents(self) -> bytes:
        """The raw file contents."""
        return self._contents

    @property
    def size(self) -> int:
        """Size of the contents in bytes."""
        return len(self._contents)

    def contents_utf8(self) -> Optional[str]:
        """Decode the contents as UTF-8.

        Returns:
            The decoded text, or None if the contents are not valid UTF-8.
        """
        try:
            return self._contents.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._path == other._path and self._contents == other._contents

    def __hash__(self) -> int:
        return hash((self._path, self._contents))

    def __repr__(self) -> str:
        return f"File(path={self._path!r}, size={len(self._contents)})"
