"""Test configuration and fixtures for dirbundle."""

import pytest

from dirbundle.tree.dir import Dir
from dirbundle.tree.file import File


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def simple_tree():
    """Root with README.md and src/main.rs."""
    return Dir(
        "",
        files=[File("README.md", b"hello")],
        dirs=[Dir("src", files=[File("src/main.rs", b"fn main(){}")])],
    )


@pytest.fixture
def nested_tree():
    """A deeper snapshot with files and directories at several levels."""
    return Dir(
        "",
        files=[File("a.txt", b"a"), File("b.md", b"b")],
        dirs=[
            Dir(
                "docs",
                files=[File("docs/guide.txt", b"guide"), File("docs/index.md", b"index")],
                dirs=[Dir("docs/api", files=[File("docs/api/ref.txt", b"ref")])],
            ),
            Dir(
                "src",
                files=[File("src/main.py", b"print('hi')\n")],
                dirs=[
                    Dir("src/empty"),
                    Dir("src/utils", files=[File("src/utils/helpers.py", b"def helper(): pass\n")]),
                ],
            ),
        ],
    )
