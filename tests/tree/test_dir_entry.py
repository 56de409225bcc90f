"""Unit tests for the DirEntry class."""

from dirbundle.tree.dir import Dir
from dirbundle.tree.dir_entry import DirEntry
from dirbundle.tree.file import File
from dirbundle.types import EntryKind


def test_file_entry():
    file = File("a/b.txt", b"x")
    entry = DirEntry(file)
    assert entry.kind is EntryKind.FILE
    assert entry.is_file()
    assert not entry.is_dir()
    assert entry.as_file() is file
    assert entry.as_dir() is None
    assert entry.entry is file
    assert entry.path == "a/b.txt"
    assert entry.name == "b.txt"


def test_dir_entry():
    directory = Dir("a/b")
    entry = DirEntry(directory)
    assert entry.kind is EntryKind.DIRECTORY
    assert entry.is_dir()
    assert not entry.is_file()
    assert entry.as_dir() is directory
    assert entry.as_file() is None
    assert entry.path == "a/b"
    assert entry.name == "b"


def test_entry_equality_follows_wrapped_entity():
    assert DirEntry(File("x", b"1")) == DirEntry(File("x", b"1"))
    assert DirEntry(File("x", b"1")) != DirEntry(File("x", b"2"))
    assert DirEntry(File("x")) != DirEntry(Dir("x"))
    assert len({DirEntry(Dir("x")), DirEntry(Dir("x"))}) == 1


def test_entry_repr():
    assert repr(DirEntry(Dir("src"))) == "DirEntry(Dir(path='src', files=0, dirs=0))"
