"""Directory node of a snapshot.

This module provides the Dir class, the composite node of an immutable snapshot.
A Dir exposes exact path lookup, lazy pre-order walks and glob searches over its
descendants, and extraction of its contents onto a real filesystem.
"""

from itertools import chain
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from dirbundle.matching.base_matcher import BaseMatcher
from dirbundle.matching.glob_matcher import GlobMatcher
from dirbundle.tree.dir_entry import DirEntry
from dirbundle.tree.extractor import extract
from dirbundle.tree.file import File
from dirbundle.tree.path import base_name, normalize_path
from dirbundle.tree.walker import Globs, TreeWalker
from dirbundle.types import PathType


class Dir:
    """A directory stored in a snapshot.

    A Dir holds its path relative to the snapshot root (the empty string for the root
    itself) and ordered tuples of child files and child directories. Trees are built
    bottom-up once and never mutated afterwards, so a Dir can be shared between any
    number of lookups, walks and threads.

    The structure is trusted as given: every descendant path is expected to start
    with the path of its parent, and no two direct children share a path. Nothing is
    validated on construction.

    Attributes:
        path (str): Path relative to the snapshot root.
        files (Tuple[File, ...]): Direct child files in stored order.
        dirs (Tuple[Dir, ...]): Direct child directories in stored order.

    Example:
        >>> root = Dir(
        ...     "",
        ...     files=[File("README.md", b"hello")],
        ...     dirs=[Dir("src", files=[File("src/main.rs", b"fn main(){}")])],
        ... )
        >>> root.get_file("src/main.rs").contents
        b'fn main(){}'
        >>> root.contains("src")
        True
        >>> [entry.path for entry in root.find("src/*")]
        ['src/main.rs']
    """

    __slots__ = ("_path", "_files", "_dirs")

    def __init__(self, path: PathType = "", files: Iterable[File] = (), dirs: Iterable["Dir"] = ()) -> None:
        """Initialize a Dir.

        Args:
            path: Path relative to the snapshot root. Defaults to the root.
            files: Direct child files, in the order they should be visited.
            dirs: Direct child directories, in the order they should be visited.
        """
        self._path = normalize_path(path)
        self._files: Tuple[File, ...] = tuple(files)
        self._dirs: Tuple[Dir, ...] = tuple(dirs)

    @property
    def path(self) -> str:
        """The normalized path relative to the snapshot root."""
        return self._path

    @property
    def name(self) -> str:
        """The last segment of the path, empty for the root."""
        return base_name(self._path)

    @property
    def files(self) -> Tuple[File, ...]:
        return self._files

    @property
    def dirs(self) -> Tuple["Dir", ...]:
        return self._dirs

    def entries(self) -> Iterator[DirEntry]:
        """Iterate over the direct children, files first, then directories."""
        return (DirEntry(entry) for entry in chain(self._files, self._dirs))

    def contains(self, path: PathType) -> bool:
        """Check whether a file or directory with exactly this path exists below this Dir.

        Args:
            path: The path to look up, relative to the snapshot root.

        Returns:
            True if get_file or get_dir finds the path.
        """
        return self.get_file(path) is not None or self.get_dir(path) is not None

    def get_dir(self, path: PathType) -> Optional["Dir"]:
        """Find a descendant directory by exactly matching its path.

        Directories are searched depth-first in pre-order: each child is compared
        before its own subtree is searched, and children are visited in stored
        order. The first exact match is returned. This Dir itself is never a
        candidate, so the snapshot root cannot be retrieved with ``get_dir("")``.

        Args:
            path: The path to look up, relative to the snapshot root.

        Returns:
            The matching Dir, or None if there is no such directory.
        """
        target = normalize_path(path)
        for entry in self._descendants():
            directory = entry.as_dir()
            if directory is not None and directory._path == target:
                return directory
        return None

    def get_file(self, path: PathType) -> Optional[File]:
        """Find a descendant file by exactly matching its path.

        The direct files of this Dir are compared first, then each child directory
        is searched recursively in stored order. The first exact match is returned.

        Args:
            path: The path to look up, relative to the snapshot root.

        Returns:
            The matching File, or None if there is no such file.
        """
        target = normalize_path(path)
        if not target:
            return None
        for entry in self._descendants():
            file = entry.as_file()
            if file is not None and file.path == target:
                return file
        return None

    def _descendants(self) -> Iterator[DirEntry]:
        # The pre-order walk visits files before subdirectories at every level,
        # which is the lookup order of both get_file and get_dir
        walker = TreeWalker(self)
        next(walker)
        return walker

    def walk(self) -> TreeWalker:
        """Lazily iterate over this Dir and all of its descendants in pre-order."""
        return TreeWalker(self)

    def find(self, pattern: Union[str, BaseMatcher]) -> Globs:
        """Search this Dir and its descendants for entries matching a glob pattern.

        The pattern is matched against each entry's full path relative to the
        snapshot root. Entries are produced lazily in the same pre-order as walk().

        Args:
            pattern: A glob pattern string, or an already compiled matcher.

        Returns:
            A single-pass iterator of matching DirEntry values.

        Raises:
            PatternError: If the pattern string is not a valid glob. The error is
                raised here, before any traversal.

        Example:
            >>> root = Dir("", [File("a.txt"), File("b.md")], [Dir("docs", [File("docs/c.txt")])])
            >>> [entry.path for entry in root.find("*.txt")]
            ['a.txt']
            >>> [entry.path for entry in root.find("**/*.txt")]
            ['a.txt', 'docs/c.txt']
        """
        matcher = pattern if isinstance(pattern, BaseMatcher) else GlobMatcher(pattern)
        return Globs(self, matcher)

    def extract(self, target: PathType) -> None:
        """Write this Dir's files and subdirectories under ``target``.

        See dirbundle.tree.extractor.extract for the exact behaviour.

        Raises:
            OSError: On the first filesystem failure; earlier writes are kept.
        """
        extract(self, target)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Dir):
            return NotImplemented
        pending: List[Tuple[Dir, Dir]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left._path != right._path or left._files != right._files or len(left._dirs) != len(right._dirs):
                return False
            pending.extend(zip(left._dirs, right._dirs))
        return True

    def __hash__(self) -> int:
        # Shallow, so hashing never walks the subtree; equal Dirs still agree
        return hash((self._path, len(self._files), len(self._dirs)))

    def __repr__(self) -> str:
        return f"Dir(path={self._path!r}, files={len(self._files)}, dirs={len(self._dirs)})"
