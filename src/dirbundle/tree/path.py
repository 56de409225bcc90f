"""Normalisation of snapshot-relative paths."""

import os
import posixpath

from dirbundle.types import PathType


def normalize_path(path: PathType) -> str:
    """Normalize a path relative to the snapshot root.

    Backslashes are converted to forward slashes, redundant separators and ``.``
    segments are collapsed, and the current directory is represented by the empty
    string. No filesystem access is performed.

    Args:
        path: The path to normalize. Can be any path-like object.

    Returns:
        The normalized path using ``/`` as separator.

    Example:
        >>> normalize_path("src//utils/./helpers.py")
        'src/utils/helpers.py'
        >>> normalize_path("./")
        ''
        >>> normalize_path("docs\\\\index.md")
        'docs/index.md'
    """
    converted = os.fspath(path).replace("\\", "/")
    if not converted:
        return ""
    normalized = posixpath.normpath(converted)
    if normalized == ".":
        return ""
    return normalized


def base_name(path: str) -> str:
    """Return the last segment of a normalized path."""
    return path.rsplit("/", 1)[-1]
