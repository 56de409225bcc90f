"""Immutable in-memory directory snapshots.

This package provides an immutable representation of a directory tree (files with
byte contents and nested subdirectories) together with exact lookup, glob search
and extraction back onto a real filesystem. Snapshots can be built from a real
directory and shipped alongside a program as a JSON bundle.
"""

from importlib.metadata import PackageNotFoundError, version

from dirbundle.exceptions import BundleFormatError, PatternError
from dirbundle.tree.dir import Dir
from dirbundle.tree.dir_entry import DirEntry
from dirbundle.tree.file import File

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirbundle")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "BundleFormatError",
    "Dir",
    "DirEntry",
    "File",
    "PatternError",
    "__version__",
]
