"""Tagged reference to either a File or a Dir."""

from typing import TYPE_CHECKING, Any, Optional, Union

from dirbundle.tree.file import File
from dirbundle.types import EntryKind

if TYPE_CHECKING:
    from dirbundle.tree.dir import Dir


class DirEntry:
    """A read-only view over exactly one File or Dir.

    DirEntry is the uniform result type of walks and glob searches. It has no
    identity of its own: two entries are equal when they wrap equal entities.

    Attributes:
        kind (EntryKind): Which variant is wrapped.
        path (str): Path of the wrapped entity.

    Example:
        >>> entry = DirEntry(File("notes.txt", b"hi"))
        >>> entry.is_file()
        True
        >>> entry.as_dir() is None
        True
        >>> entry.path
        'notes.txt'
    """

    __slots__ = ("_entry", "_kind")

    def __init__(self, entry: Union[File, "Dir"]) -> None:
        """Initialize a DirEntry.

        Args:
            entry: The File or Dir to wrap.
        """
        self._entry = entry
        self._kind = EntryKind.FILE if isinstance(entry, File) else EntryKind.DIRECTORY

    @property
    def kind(self) -> EntryKind:
        return self._kind

    @property
    def path(self) -> str:
        return self._entry.path

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def entry(self) -> Union[File, "Dir"]:
        """The wrapped File or Dir."""
        return self._entry

    def is_file(self) -> bool:
        return self._kind is EntryKind.FILE

    def is_dir(self) -> bool:
        return self._kind is EntryKind.DIRECTORY

    def as_file(self) -> Optional[File]:
        """Return the wrapped File, or None if this entry wraps a Dir."""
        if isinstance(self._entry, File):
            return self._entry
        return None

    def as_dir(self) -> Optional["Dir"]:
        """Return the wrapped Dir, or None if this entry wraps a File."""
        if isinstance(self._entry, File):
            return None
        return self._entry

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DirEntry):
            return NotImplemented
        return self._kind is other._kind and self._entry == other._entry

    def __hash__(self) -> int:
        return hash((self._kind, self._entry))

    def __repr__(self) -> str:
        return f"DirEntry({self._entry!r})"
