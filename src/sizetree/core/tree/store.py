from __future__ import annotations

"""
Tree Store.

Owns the root of a size tree and provides path-addressed insertion and
lookup, size aggregation and lazy enumeration of every node location.
Paths are resolved iteratively, one segment at a time.
"""

import logging
from typing import Dict, Iterator, Optional

from sizetree.core.tree.sizes import total_size as _total_size
from sizetree.core.tree.walker import FrameStackWalker
from sizetree.domain.errors import (
    NodeNotADirectoryError,
    NodeNotFoundError,
    format_path,
)
from sizetree.domain.tree_models import (
    DirectoryNode,
    FileNode,
    Node,
    PathList,
    TreePath,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NODE CONSTRUCTORS
# -----------------------------------------------------------------------------

def new_file(size: int, name: str = "") -> FileNode:
    """
    Create a file node.

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"File size must be non-negative, received {size}.")
    return FileNode(name=name, size=size)


def new_directory(children: Optional[Dict[str, Node]] = None, name: str = "") -> DirectoryNode:
    """
    Create a directory node that takes ownership of the given children.

    Each child is renamed after the key it is stored under.
    """
    owned: Dict[str, Node] = dict(children or {})
    for key, child in owned.items():
        child.name = key
    return DirectoryNode(name=name, children=owned)

# -----------------------------------------------------------------------------
# STORE
# -----------------------------------------------------------------------------

class TreeStore:
    """
    Exclusive owner of a size tree.

    Args:
        root: Existing root directory to adopt. A fresh empty root is
            created when omitted.
    """

    new_file = staticmethod(new_file)
    new_directory = staticmethod(new_directory)

    def __init__(self, root: Optional[DirectoryNode] = None) -> None:
        self._root: DirectoryNode = root if root is not None else DirectoryNode(name="")

    @property
    def root(self) -> DirectoryNode:
        return self._root

    # --- Mutation ---

    def insert_at(self, path: TreePath, name: str, node: Node) -> None:
        """
        Insert node under name inside the directory located at path.

        An existing entry with the same name is replaced. The target is
        resolved completely before anything is modified, a failed call
        leaves the tree untouched.

        Args:
            path: Location of the receiving directory.
            name: Entry name for the node inside that directory.
            node: Node to insert. Its name is set to `name`.

        Raises:
            NodeNotFoundError: A segment of path does not exist.
            NodeNotADirectoryError: A segment of path is a file.
        """
        directory = self.directory_at(path)
        node.name = name
        directory.children[name] = node
        logger.debug(f"Inserted {'dir' if node.is_dir else 'file'} '{name}' at {format_path(path)}")

    # --- Lookup ---

    def directory_at(self, path: TreePath) -> DirectoryNode:
        """
        Resolve path to a directory, failing loudly on any structural problem.

        Raises:
            NodeNotFoundError: A segment of path does not exist.
            NodeNotADirectoryError: A segment of path is a file.
        """
        current = self._root
        for index, segment in enumerate(path):
            child = current.children.get(segment)
            if child is None:
                raise NodeNotFoundError(
                    f"No entry '{segment}' in {format_path(path[:index])}", path, index
                )
            if not isinstance(child, DirectoryNode):
                raise NodeNotADirectoryError(
                    f"'{format_path(path[:index + 1])}' is a file, not a directory", path, index
                )
            current = child
        return current

    def get_at(self, path: TreePath) -> Optional[Node]:
        """
        Resolve path from the root.

        Returns:
            Optional[Node]: The node itself, or None when a segment is missing
                            or a file is used as an intermediate segment.
        """
        current: Node = self._root
        for segment in path:
            if not isinstance(current, DirectoryNode):
                return None
            child = current.children.get(segment)
            if child is None:
                return None
            current = child
        return current

    # --- Aggregation & Enumeration ---

    def total_size(self, node: Optional[Node] = None) -> int:
        """Total size of node (the root by default), recomputed on every call."""
        return _total_size(self._root if node is None else node)

    def iter_entries(self, node: Optional[Node] = None, sort_children: bool = False) -> FrameStackWalker:
        """Return a fresh walker over node (the root by default)."""
        return FrameStackWalker(self._root if node is None else node, sort_children=sort_children)

    def walk(self, node: Optional[Node] = None) -> Iterator[PathList]:
        """
        Lazily yield the path of every node under node, itself included.

        Paths are relative to node, its own path being the empty list. Every
        yielded list is a new object.
        """
        for entry in self.iter_entries(node):
            yield list(entry.path)

    def node_count(self) -> int:
        """Number of nodes in the tree, the root included."""
        walker = self.iter_entries()
        for _ in walker:
            pass
        return walker.emitted
