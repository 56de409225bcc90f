"""JSON bundle format for snapshots.

A bundle is a JSON document holding a whole snapshot, with file contents encoded
as base64 so arbitrary binary data survives the round trip:

    {
        "format": "dirbundle",
        "version": 1,
        "root": {
            "path": "",
            "files": [{"path": "README.md", "contents": "aGVsbG8="}],
            "dirs": [{"path": "src", "files": [...], "dirs": [...]}]
        }
    }

Bundles can be written next to a program's code as package data and loaded back
at runtime with load_resource(), without access to the directory they were built
from.
"""

import base64
import binascii
import json
from importlib import resources
from typing import IO, Any, Dict, List

from dirbundle.exceptions import BundleFormatError
from dirbundle.tree.dir import Dir
from dirbundle.tree.file import File

FORMAT_NAME = "dirbundle"
FORMAT_VERSION = 1


def _encode_file(file: File) -> Dict[str, Any]:
    return {"path": file.path, "contents": base64.b64encode(file.contents).decode("ascii")}


def _encode_dir(directory: Dir) -> Dict[str, Any]:
    return {
        "path": directory.path,
        "files": [_encode_file(file) for file in directory.files],
        "dirs": [_encode_dir(subdirectory) for subdirectory in directory.dirs],
    }


def dumps(directory: Dir, indent: Any = None) -> str:
    """Serialize a snapshot to a JSON bundle string.

    Args:
        directory: The snapshot to serialize.
        indent: Passed through to json.dumps. Defaults to a compact document.

    Returns:
        The JSON document.

    Example:
        >>> document = dumps(Dir("", [File("a.txt", b"hi")]))
        >>> loads(document).get_file("a.txt").contents
        b'hi'
    """
    document = {"format": FORMAT_NAME, "version": FORMAT_VERSION, "root": _encode_dir(directory)}
    return json.dumps(document, indent=indent)


def dump(directory: Dir, fp: IO[str], indent: Any = None) -> None:
    """Serialize a snapshot as a JSON bundle into a text file object."""
    fp.write(dumps(directory, indent=indent))


def _require(node: Any, key: str, expected: type, location: str) -> Any:
    if not isinstance(node, dict):
        raise BundleFormatError(location, f"expected an object, got {type(node).__name__}")
    if key not in node:
        raise BundleFormatError(location, f"missing {key!r}")
    value = node[key]
    if not isinstance(value, expected):
        raise BundleFormatError(location, f"{key!r} must be of type {expected.__name__}")
    return value


def _decode_file(node: Any, location: str) -> File:
    path = _require(node, "path", str, location)
    encoded = _require(node, "contents", str, location)
    try:
        contents = base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise BundleFormatError(location, f"contents are not valid base64: {e}") from e
    return File(path, contents)


def _decode_dir(node: Any, location: str) -> Dir:
    path = _require(node, "path", str, location)
    file_nodes: List[Any] = _require(node, "files", list, location)
    dir_nodes: List[Any] = _require(node, "dirs", list, location)
    files = [_decode_file(child, f"{location}.files[{i}]") for i, child in enumerate(file_nodes)]
    dirs = [_decode_dir(child, f"{location}.dirs[{i}]") for i, child in enumerate(dir_nodes)]
    return Dir(path, files, dirs)


def loads(text: str) -> Dir:
    """Rebuild a snapshot from a JSON bundle string.

    Args:
        text: The JSON document.

    Returns:
        The root Dir of the snapshot.

    Raises:
        BundleFormatError: If the text is not JSON, names another format or an
            unsupported version, or any node is missing a field or has the wrong type.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise BundleFormatError("document", f"not valid JSON: {e}") from e

    name = _require(document, "format", str, "document")
    if name != FORMAT_NAME:
        raise BundleFormatError("document", f"unknown format {name!r}")
    version = _require(document, "version", int, "document")
    if version != FORMAT_VERSION:
        raise BundleFormatError("document", f"unsupported version {version}")
    if "root" not in document:
        raise BundleFormatError("document", "missing 'root'")
    return _decode_dir(document["root"], "root")


def load(fp: IO[str]) -> Dir:
    """Rebuild a snapshot from a text file object holding a JSON bundle."""
    return loads(fp.read())


def load_resource(package: str, resource: str) -> Dir:
    """Load a bundle shipped as package data.

    Args:
        package: Dotted name of the package that contains the bundle.
        resource: Name of the bundle file inside that package.

    Returns:
        The root Dir of the snapshot.

    Raises:
        FileNotFoundError: If the package has no such resource.
        BundleFormatError: If the resource is not a valid bundle.
    """
    text = resources.files(package).joinpath(resource).read_text(encoding="utf-8")
    return loads(text)
