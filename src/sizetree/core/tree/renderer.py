from __future__ import annotations

"""
Tree Renderer.

Converts a size tree into indented text lines, one per node, in name
order:

    - / (dir)
      - a (dir)
        - i (file, size=584)
"""

from typing import Dict, List, Optional, Tuple

from sizetree.core.tree.sizes import rollup_sizes
from sizetree.core.tree.walker import FrameStackWalker
from sizetree.domain.tree_models import Node

INDENT = "  "
ROOT_LABEL = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(root: Node, show_totals: bool = False) -> List[str]:
    """
    Render every node under root as an indented line.

    Args:
        root: Node rendered at the outermost level.
        show_totals: Append the aggregated total to directory lines.

    Returns:
        List[str]: Visual lines of the tree.
    """
    totals: Optional[Dict[Tuple[str, ...], int]] = rollup_sizes(root) if show_totals else None
    lines: List[str] = []

    for entry in FrameStackWalker(root, sort_children=True):
        label = entry.path[-1] if entry.path else (root.name or ROOT_LABEL)
        prefix = INDENT * len(entry.path)

        if entry.node.is_dir:
            details = "dir"
            if totals is not None:
                details += f", total={totals[entry.path]}"
        else:
            details = f"file, size={entry.node.size}"

        lines.append(f"{prefix}- {label} ({details})")

    return lines
