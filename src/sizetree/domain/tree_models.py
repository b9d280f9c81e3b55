from __future__ import annotations

"""
Size Tree Data Models.

Provides the recursive node types of the size-aggregating tree. A node is
either a FileNode (leaf with a declared size) or a DirectoryNode (owner of
a name-keyed mapping of child nodes, with no size of its own).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileNode:
    """
    Represents a leaf entry (file) in the size tree.

    Attributes:
        name: Entry name inside the owning directory.
        size: Declared size in bytes.
    """
    name: str
    size: int

    @property
    def is_dir(self) -> bool:
        return False


@dataclass
class DirectoryNode:
    """
    Represents a directory owning its children by name.

    The total size of a directory is always derived from its descendants,
    its own declared size is zero.

    Attributes:
        name: Entry name inside the owning directory ("" for the root).
        children: Owned child nodes keyed by their names.
    """
    name: str
    children: Dict[str, "Node"] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return 0

    @property
    def is_dir(self) -> bool:
        return True


Node = Union[FileNode, DirectoryNode]

# Ordered names from the root to a node; the root is the empty sequence
TreePath = Sequence[str]
PathList = List[str]
