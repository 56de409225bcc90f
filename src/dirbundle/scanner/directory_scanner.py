"""Scanning of real directories into immutable snapshots.

This module provides the DirectoryScanner class, which reads a directory on disk
into a draft tree of anytree nodes, honouring exclusion rules, symlink settings and
the configured permission handling, and then freezes the draft bottom-up into a
Dir whose paths are relative to the scanned directory.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Set, Union, cast

from anytree import PostOrderIter

from dirbundle.exclusion_rules.base_rules import BaseExclusionRules
from dirbundle.scanner.file_identifier import FileIdentifier
from dirbundle.scanner.file_system_node import FileSystemNode
from dirbundle.scanner.permission_action import PermissionAction
from dirbundle.tree.dir import Dir
from dirbundle.tree.file import File
from dirbundle.types import PathType


class DirectoryScanner:
    """Builds a snapshot of a directory on disk.

    Entries are read in sorted name order, so scanning the same directory twice
    produces equal snapshots. Only regular files and directories are captured;
    sockets, FIFOs and device files are skipped.

    Symbolic Link Behavior:
        By default, symbolic links are left out of the snapshot. When follow_symlinks
        is True, links are captured as the file or directory they point to, and a
        link that leads back to one of its own ancestor directories is skipped.

    Permission Handling:
        - IGNORE (default): Unreadable files are left out; unreadable directories are
          captured empty
        - RAISE: The PermissionError is propagated and the scan is aborted

    Attributes:
        root_path (Path): The directory to scan.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for leaving entries out.
        permission_action (PermissionAction): How to handle permission errors.
        follow_symlinks (bool): Whether to follow symbolic links.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     _ = Path(tmpdir, "notes.txt").write_bytes(b"remember")
        ...     snapshot = DirectoryScanner(tmpdir).scan()
        >>> snapshot.get_file("notes.txt").contents
        b'remember'
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
        follow_symlinks: bool = False,
    ) -> None:
        """Initialize a DirectoryScanner.

        Args:
            root_path: Directory to scan. Can be any path-like object.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
            permission_action: How to handle permission errors. Defaults to IGNORE.
            follow_symlinks: Whether to follow symbolic links. Defaults to False.
        """
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self.follow_symlinks = follow_symlinks

    def scan(self) -> Dir:
        """Read the directory and return its snapshot.

        Returns:
            The root Dir of the snapshot, with the empty string as its path.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If access is denied and permission_action is RAISE.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        draft = FileSystemNode("", relative_path="", is_dir=True)
        visited: Set[FileIdentifier] = set()
        self._fill_directory(draft, self.root_path, visited)
        return self._freeze(draft)

    def _fill_directory(self, node: FileSystemNode, path: Path, visited: Set[FileIdentifier]) -> None:
        """Attach draft nodes for the children of a directory."""
        file_id = FileIdentifier.of(path)
        if file_id is not None:
            visited.add(file_id)

        try:
            children = sorted(os.listdir(path))
        except PermissionError:
            if self.permission_action == PermissionAction.RAISE:
                raise
            children = []

        for child in children:
            child_path = path / child
            child_relative_path = f"{node.relative_path}/{child}" if node.relative_path else child
            self._create_node(child_path, child_relative_path, visited, parent=node)

        # Allow the same directory to be reached again through an unrelated branch
        if file_id is not None:
            visited.discard(file_id)

    def _create_node(
        self,
        path: Path,
        relative_path: str,
        visited: Set[FileIdentifier],
        parent: FileSystemNode,
    ) -> Optional[FileSystemNode]:
        """Create the draft node for a path, or return None if it is left out."""
        if path.is_symlink() and not self.follow_symlinks:
            return None

        is_dir = path.is_dir()
        if not is_dir and not path.is_file():
            return None

        if self._is_excluded(relative_path, is_dir):
            return None

        if is_dir:
            file_id = FileIdentifier.of(path)
            if file_id is not None and file_id in visited:
                # Symlink loop back to an ancestor
                return None
            node = FileSystemNode(path.name, parent=parent, relative_path=relative_path, is_dir=True)
            self._fill_directory(node, path, visited)
            return node

        try:
            contents = path.read_bytes()
        except PermissionError:
            if self.permission_action == PermissionAction.RAISE:
                raise
            return None
        return FileSystemNode(path.name, parent=parent, relative_path=relative_path, contents=contents)

    def _is_excluded(self, relative_path: str, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(relative_path):
            return True
        # Directory-only patterns such as "build/" need the trailing slash to apply
        return is_dir and self.exclusion_rules.exclude(relative_path + "/")

    @staticmethod
    def _freeze(draft: FileSystemNode) -> Dir:
        """Convert a draft tree into an immutable snapshot, children before parents."""
        frozen: Dict[FileSystemNode, Union[File, Dir]] = {}
        for node in PostOrderIter(draft):
            if node.is_dir:
                files = [frozen.pop(child) for child in node.children if not child.is_dir]
                dirs = [frozen.pop(child) for child in node.children if child.is_dir]
                frozen[node] = Dir(node.relative_path, files, dirs)
            else:
                frozen[node] = File(node.relative_path, node.contents)
        return cast(Dir, frozen[draft])


def scan_directory(
    root_path: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: PermissionAction = PermissionAction.IGNORE,
    follow_symlinks: bool = False,
) -> Dir:
    """Scan a directory on disk into a snapshot.

    This is a shortcut for ``DirectoryScanner(...).scan()``; see DirectoryScanner
    for the meaning of the arguments and the exceptions raised.
    """
    return DirectoryScanner(root_path, exclusion_rules, permission_action, follow_symlinks).scan()
