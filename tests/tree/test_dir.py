"""Unit tests for exact lookup on the Dir class."""

from pathlib import Path

import pytest

from dirbundle.tree.dir import Dir
from dirbundle.tree.file import File


def test_dir_attributes(simple_tree):
    assert simple_tree.path == ""
    assert simple_tree.name == ""
    assert [f.path for f in simple_tree.files] == ["README.md"]
    assert [d.path for d in simple_tree.dirs] == ["src"]
    assert isinstance(simple_tree.files, tuple)
    assert isinstance(simple_tree.dirs, tuple)


def test_get_file_scenario(simple_tree):
    readme = simple_tree.get_file("README.md")
    assert readme is not None
    assert readme.contents == b"hello"


def test_get_dir_scenario(simple_tree):
    src = simple_tree.get_dir("src")
    assert src is not None
    assert src.path == "src"
    assert src.get_file("src/main.rs").contents == b"fn main(){}"


def test_every_present_file_is_found(nested_tree):
    for entry in nested_tree.walk():
        file = entry.as_file()
        if file is not None:
            assert nested_tree.get_file(file.path) == file
            assert nested_tree.contains(file.path)


def test_every_present_dir_is_found(nested_tree):
    for entry in nested_tree.walk():
        directory = entry.as_dir()
        if directory is not None and directory.path:
            assert nested_tree.get_dir(directory.path) == directory
            assert nested_tree.contains(directory.path)


@pytest.mark.parametrize(
    "path",
    ["missing.txt", "docs/missing.md", "src/utils/helpers", "utils/helpers.py", "main.py", "doc", "/a.txt"],
)
def test_absent_paths(nested_tree, path):
    assert nested_tree.get_file(path) is None
    assert nested_tree.get_dir(path) is None
    assert not nested_tree.contains(path)


def test_lookup_is_exact_not_prefix_or_suffix(nested_tree):
    assert nested_tree.get_dir("docs/ap") is None
    assert nested_tree.get_dir("api") is None
    assert nested_tree.get_file("guide.txt") is None
    assert nested_tree.get_file("docs/guide.txt") is not None


def test_lookup_kind_is_respected(nested_tree):
    assert nested_tree.get_file("docs") is None
    assert nested_tree.get_dir("a.txt") is None


def test_lookup_normalizes_input(nested_tree):
    assert nested_tree.get_file("./docs//api/ref.txt").path == "docs/api/ref.txt"
    assert nested_tree.get_file(Path("docs") / "api" / "ref.txt") is not None
    assert nested_tree.get_dir("docs/api/").path == "docs/api"


def test_root_is_not_returned_by_get_dir(nested_tree):
    assert nested_tree.get_dir("") is None
    assert nested_tree.get_dir(".") is None


def test_empty_path_never_matches_a_file(nested_tree):
    assert nested_tree.get_file("") is None
    assert not nested_tree.contains("")


def test_lookup_from_subdirectory(nested_tree):
    docs = nested_tree.get_dir("docs")
    assert docs.get_file("docs/api/ref.txt").contents == b"ref"
    assert docs.get_file("a.txt") is None
    assert docs.get_dir("docs/api") is not None


def test_get_file_prefers_direct_files():
    # Malformed on purpose: the same path at two levels shows which one is searched first
    shallow = File("dup.txt", b"shallow")
    deep = File("dup.txt", b"deep")
    root = Dir("", files=[shallow], dirs=[Dir("sub", files=[deep])])
    assert root.get_file("dup.txt").contents == b"shallow"


def test_get_dir_checks_child_before_its_subtree():
    inner = Dir("x", files=[File("x/inner.txt")])
    outer = Dir("x", dirs=[inner])
    root = Dir("", dirs=[outer])
    assert root.get_dir("x") is outer


def test_entries_lists_files_then_dirs(nested_tree):
    assert [entry.path for entry in nested_tree.entries()] == ["a.txt", "b.md", "docs", "src"]


def test_dir_equality_and_hash():
    first = Dir("d", [File("d/a", b"1")], [Dir("d/e")])
    second = Dir("d", (File("d/a", b"1"),), (Dir("d/e"),))
    assert first == second
    assert hash(first) == hash(second)
    assert first != Dir("d", [File("d/a", b"2")], [Dir("d/e")])
    assert first != File("d")


def test_dir_is_read_only(simple_tree):
    with pytest.raises(AttributeError):
        simple_tree.files = ()
    with pytest.raises(AttributeError):
        simple_tree.extra = 1


def test_dir_repr(nested_tree):
    assert repr(nested_tree) == "Dir(path='', files=2, dirs=2)"


def build_chain(depth, contents=b"leaf"):
    """A root with a single chain of nested directories ending in leaf.txt."""
    path = "/".join(["d"] * depth)
    node = Dir(path, [File(path + "/leaf.txt", contents)])
    for level in range(depth - 1, 0, -1):
        node = Dir("/".join(["d"] * level), dirs=[node])
    return Dir("", dirs=[node])


def test_lookups_on_deep_trees():
    depth = 5000
    root = build_chain(depth)
    deepest = "/".join(["d"] * depth)

    assert root.get_file("missing") is None
    assert root.get_dir("missing") is None
    assert not root.contains("missing")
    assert root.get_file(deepest + "/leaf.txt").contents == b"leaf"
    assert root.get_dir(deepest).path == deepest
    assert root.contains(deepest)


def test_equality_and_hash_on_deep_trees():
    first = build_chain(5000)
    second = build_chain(5000)

    assert first == second
    assert hash(first) == hash(second)
    assert first != build_chain(5000, contents=b"other")
    assert first != build_chain(4999)


def test_dirs_differing_only_below_the_top_level():
    first = Dir("", dirs=[Dir("a", dirs=[Dir("a/b", [File("a/b/x", b"1")])])])
    second = Dir("", dirs=[Dir("a", dirs=[Dir("a/b", [File("a/b/x", b"2")])])])

    assert first != second
    assert len({first, second}) == 2
