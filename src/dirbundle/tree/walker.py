"""Lazy pre-order walks and glob searches over a snapshot."""

from typing import TYPE_CHECKING, Iterator, List

from dirbundle.matching.base_matcher import BaseMatcher
from dirbundle.tree.dir_entry import DirEntry

if TYPE_CHECKING:
    from dirbundle.tree.dir import Dir


class TreeWalker:
    """Single-pass pre-order iterator over a directory and all of its descendants.

    The starting directory is yielded first, followed by its files and then each of
    its subdirectories, which are walked in turn before their next sibling. Children
    are visited in the order they are stored, so the walk is deterministic.

    The walker keeps an explicit stack with one iterator of remaining siblings per
    depth level, so arbitrarily deep trees never grow the call stack. Entries are
    produced on demand; once exhausted the walker stays exhausted.

    Example:
        >>> from dirbundle.tree.dir import Dir
        >>> from dirbundle.tree.file import File
        >>> root = Dir("", [File("a.txt")], [Dir("docs", [File("docs/b.md")])])
        >>> [entry.path for entry in TreeWalker(root)]
        ['', 'a.txt', 'docs', 'docs/b.md']
    """

    def __init__(self, root: "Dir") -> None:
        """Initialize a TreeWalker.

        Args:
            root: The directory to start from.
        """
        self._pending_root = True
        self._root = root
        self._stack: List[Iterator[DirEntry]] = []

    def __iter__(self) -> "TreeWalker":
        return self

    def __next__(self) -> DirEntry:
        if self._pending_root:
            self._pending_root = False
            self._stack.append(self._root.entries())
            return DirEntry(self._root)

        while self._stack:
            entry = next(self._stack[-1], None)
            if entry is None:
                self._stack.pop()
                continue
            directory = entry.as_dir()
            if directory is not None:
                self._stack.append(directory.entries())
            return entry

        raise StopIteration


class Globs:
    """Iterator over the entries of a walk whose paths satisfy a matcher.

    Both files and directories are candidates. Matching is evaluated against the
    full path relative to the snapshot root.

    Attributes:
        matcher (BaseMatcher): The compiled matcher applied to each entry path.
    """

    def __init__(self, root: "Dir", matcher: BaseMatcher) -> None:
        """Initialize a Globs iterator.

        Args:
            root: The directory to search.
            matcher: A compiled matcher. Pattern compilation happens before this
                iterator is created, so no traversal takes place for bad patterns.
        """
        self.matcher = matcher
        self._walker = TreeWalker(root)

    def __iter__(self) -> "Globs":
        return self

    def __next__(self) -> DirEntry:
        for entry in self._walker:
            if self.matcher.matches(entry.path):
                return entry
        raise StopIteration
