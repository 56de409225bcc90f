"""Mutable draft node used while a snapshot is being scanned."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Draft node for a file or directory found during a scan.

    Extends anytree.Node with the data a snapshot needs. Drafts are assembled top-down
    while the directory is read, then frozen bottom-up into immutable File and Dir
    objects once the scan is complete.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the draft tree.
        relative_path (str): Path relative to the scanned root, using ``/``.
        is_dir (bool): True if this node represents a directory.
        contents (bytes): File contents; always empty for directories.

    Example:
        >>> root = FileSystemNode("", relative_path="", is_dir=True)
        >>> child = FileSystemNode("a.txt", parent=root, relative_path="a.txt", contents=b"x")
        >>> child.parent is root
        True
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        relative_path: str = "",
        is_dir: bool = False,
        contents: bytes = b"",
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            relative_path: Path relative to the scanned root. Defaults to the root.
            is_dir: Whether this node represents a directory. Defaults to False.
            contents: File contents. Defaults to empty.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.relative_path = relative_path
        self.is_dir = is_dir
        self.contents = contents
