from __future__ import annotations

"""
Size Aggregation.

Derives total sizes from the declared sizes of files. total_size() is
evaluated freshly on every call; rollup_sizes() computes every directory
total of a finished tree in a single bottom-up pass for callers that query
many directories.
"""

from typing import Dict, Tuple

from sizetree.core.tree.walker import FrameStackWalker
from sizetree.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def total_size(node: Node) -> int:
    """
    Compute the own size of a node plus the total size of all descendants.

    Directories contribute zero themselves, so the total is the sum of every
    file reachable from the node, each counted once. The descent runs on the
    explicit frame stack, arbitrarily deep trees are fine.

    Args:
        node: File or directory to measure.

    Returns:
        int: Aggregated size in bytes.
    """
    return sum(entry.node.size for entry in FrameStackWalker(node))


def rollup_sizes(root: Node) -> Dict[Tuple[str, ...], int]:
    """
    Compute the total size of every directory under root in one pass.

    Visits nodes in reverse pre-order, which guarantees every descendant is
    folded into its parent before the parent itself is read (post-order).

    Args:
        root: Node the returned paths are relative to.

    Returns:
        Dict[Tuple[str, ...], int]: Directory path -> total size.
    """
    entries = list(FrameStackWalker(root))
    totals: Dict[Tuple[str, ...], int] = {}

    for entry in reversed(entries):
        own_total = totals.get(entry.path, 0) + entry.node.size
        totals[entry.path] = own_total
        if entry.path:
            parent = entry.path[:-1]
            totals[parent] = totals.get(parent, 0) + own_total

    return {entry.path: totals[entry.path] for entry in entries if entry.node.is_dir}
