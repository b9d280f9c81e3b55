from __future__ import annotations

"""
Frame-Stack Walker.

Depth-first, pre-order traversal over a rooted node hierarchy that keeps
its "call stack" as explicit, heap-resident frames instead of native
recursion. Each call to step() yields exactly one node, so a consumer can
pull a node, do unrelated work and resume later. Nesting depth is bounded
by available memory only.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Mapping, Optional, Tuple

from sizetree.domain.tree_models import DirectoryNode, Node

ChildrenOf = Callable[[Any], Optional[Mapping[str, Any]]]
PathTuple = Tuple[str, ...]

# -----------------------------------------------------------------------------
# TRAVERSAL STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WalkEntry:
    """
    One visited node.

    Attributes:
        path: Names from the walk root to the node (empty for the walk root).
        node: Reference to the visited node, never a copy.
    """
    path: PathTuple
    node: Any


@dataclass
class Frame:
    """
    Saved traversal position at one level of descent.

    Attributes:
        entries: Every (name, node) sibling of this level.
        prefix: Path of the directory owning these siblings.
        parent: Frame of the enclosing level, None for the outermost one.
        position: Index of the next sibling to emit.
    """
    entries: List[Tuple[str, Any]]
    prefix: PathTuple = ()
    parent: Optional["Frame"] = None
    position: int = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.entries)

    @property
    def remaining(self) -> List[Tuple[str, Any]]:
        """Siblings at this level that have not been emitted yet."""
        return self.entries[self.position:]


def directory_children(node: Node) -> Optional[Mapping[str, Node]]:
    """Default child accessor: the children mapping of a DirectoryNode."""
    if isinstance(node, DirectoryNode):
        return node.children
    return None

# -----------------------------------------------------------------------------
# WALKER
# -----------------------------------------------------------------------------

class FrameStackWalker:
    """
    Lazy pre-order enumeration of every node under a root.

    Args:
        root: Node to start from. It is emitted first, with the empty path.
        children_of: Accessor returning a name->child mapping for container
            nodes and None for leaves. Defaults to DirectoryNode children,
            any equivalent hierarchy can be walked by passing its own accessor.
        sort_children: Visit siblings in name order instead of mapping order.
    """

    def __init__(
            self,
            root: Any,
            children_of: Optional[ChildrenOf] = None,
            sort_children: bool = False,
    ) -> None:
        self._children_of: ChildrenOf = children_of or directory_children
        self._sort_children = sort_children
        # The outermost frame holds only the walk root
        self._frame: Optional[Frame] = Frame(entries=[("", root)])
        self._emitted = 0

    def __iter__(self) -> Iterator[WalkEntry]:
        return self

    def __next__(self) -> WalkEntry:
        entry = self.step()
        if entry is None:
            raise StopIteration
        return entry

    @property
    def exhausted(self) -> bool:
        """True once step() has reported the end of the walk."""
        return self._frame is None

    @property
    def emitted(self) -> int:
        """Number of nodes produced so far."""
        return self._emitted

    @property
    def depth(self) -> int:
        """Number of live frames on the explicit stack."""
        return len(self.frames())

    def frames(self) -> List[Frame]:
        """Return the live frames, innermost first."""
        chain: List[Frame] = []
        frame = self._frame
        while frame is not None:
            chain.append(frame)
            frame = frame.parent
        return chain

    def step(self) -> Optional[WalkEntry]:
        """
        Advance by exactly one node.

        Pops exhausted frames until one has an unvisited sibling, emits that
        sibling and, when it is a container, pushes a frame over its children
        so the next call descends into it.

        Returns:
            Optional[WalkEntry]: The next node, or None once the walk is over.
        """
        frame = self._frame
        while frame is not None and frame.exhausted:
            frame = frame.parent
        self._frame = frame
        if frame is None:
            return None

        name, node = frame.entries[frame.position]
        frame.position += 1
        path = frame.prefix + (name,) if frame.parent is not None else ()

        children = self._children_of(node)
        if children is not None:
            names = sorted(children) if self._sort_children else list(children)
            self._frame = Frame(
                entries=[(child_name, children[child_name]) for child_name in names],
                prefix=path,
                parent=frame,
            )

        self._emitted += 1
        return WalkEntry(path=path, node=node)
