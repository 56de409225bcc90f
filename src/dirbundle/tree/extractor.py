"""Materialization of a snapshot directory onto a real filesystem."""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from dirbundle.types import PathType

if TYPE_CHECKING:
    from dirbundle.tree.dir import Dir


def extract(directory: "Dir", target: PathType) -> None:
    """Recreate a snapshot directory's structure and contents under ``target``.

    The target directory is created together with any missing parents. Each direct
    file is written to ``target`` joined with the file's base name: it is created if
    absent, truncated if present, and synced to disk before the next step. Each
    direct subdirectory is extracted recursively into ``target`` joined with its base
    name, so the nested layout of the snapshot is reproduced level by level.

    Extraction is not atomic. The first failure aborts the whole operation and the
    original OSError is propagated unchanged; entries written before the failure are
    left in place. Running the same extraction again overwrites them with identical
    contents.

    Args:
        directory: The snapshot directory to extract.
        target: Destination directory on the real filesystem. Can be any path-like
            object.

    Raises:
        OSError: If a directory cannot be created or a file cannot be written or
            synced (for example PermissionError, or FileExistsError when a
            non-directory already occupies a directory's destination).

    Example:
        >>> import tempfile
        >>> from dirbundle.tree.dir import Dir
        >>> from dirbundle.tree.file import File
        >>> snapshot = Dir("", [File("README.md", b"hello")], [Dir("src", [File("src/main.rs")])])
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     extract(snapshot, tmpdir)
        ...     sorted(os.listdir(tmpdir))
        ['README.md', 'src']
    """
    destination = Path(target)
    destination.mkdir(parents=True, exist_ok=True)

    for file in directory.files:
        with open(destination / file.name, "wb") as handle:
            handle.write(file.contents)
            handle.flush()
            os.fsync(handle.fileno())

    for subdirectory in directory.dirs:
        extract(subdirectory, destination / subdirectory.name)
