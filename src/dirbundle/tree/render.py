"""Text rendering of a snapshot in the style of the Unix ``tree`` command."""

from typing import Iterator, List, Union

from dirbundle.tree.dir import Dir
from dirbundle.tree.file import File


def _sorted_children(directory: Dir) -> List[Union[File, Dir]]:
    # Directories first, then files, both alphabetically
    children: List[Union[File, Dir]] = [*directory.dirs, *directory.files]
    return sorted(children, key=lambda n: (not isinstance(n, Dir), n.name.lower()))


def render_tree(directory: Dir, root_name: str = ".") -> Iterator[str]:
    """Generate a tree representation of a snapshot one line at a time.

    Args:
        directory: The directory to render.
        root_name: Label used for the first line when the directory is the snapshot
            root, which has no name of its own. Defaults to ".".

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> snapshot = Dir("", [File("README.md")], [Dir("src", [File("src/main.rs")])])
        >>> for line in render_tree(snapshot):
        ...     print(line)
        ./
        ├── src/
        │   └── main.rs
        └── README.md
    """

    def write_node(node: Union[File, Dir], prefix: str, is_last: bool) -> Iterator[str]:
        connector = "└── " if is_last else "├── "
        if isinstance(node, File):
            yield f"{prefix}{connector}{node.name}"
            return

        yield f"{prefix}{connector}{node.name}/"
        children = _sorted_children(node)
        child_prefix = prefix + ("    " if is_last else "│   ")
        for i, child in enumerate(children):
            yield from write_node(child, child_prefix, i == len(children) - 1)

    yield f"{directory.name or root_name}/"
    children = _sorted_children(directory)
    for i, child in enumerate(children):
        yield from write_node(child, "", i == len(children) - 1)
