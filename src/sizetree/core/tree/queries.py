from __future__ import annotations

"""
Aggregate Directory Queries.

Read-only questions answered over a finished tree: the sum of directory
totals under a threshold, and the smallest directory whose total reaches a
threshold. Each directory is measured exactly once per query, either by a
fresh total_size() call or from a single rollup pass (use_cache=True).
Both modes return identical results.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from sizetree.core.tree.sizes import rollup_sizes
from sizetree.core.tree.store import TreeStore
from sizetree.domain.constants import DISK_CAPACITY, REQUIRED_FREE_SPACE


@dataclass(frozen=True)
class DirectorySize:
    """Total size of the directory found at path."""
    path: Tuple[str, ...]
    size: int

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_directory_sizes(store: TreeStore, use_cache: bool = False) -> Iterator[DirectorySize]:
    """
    Yield the total size of every directory in the store, root included.

    Args:
        store: Tree to inspect.
        use_cache: Derive all totals from one bottom-up pass instead of
                   recomputing each directory on its own.
    """
    if use_cache:
        for path, size in rollup_sizes(store.root).items():
            yield DirectorySize(path=path, size=size)
        return

    for entry in store.iter_entries():
        if entry.node.is_dir:
            yield DirectorySize(path=entry.path, size=store.total_size(entry.node))


def sum_directories_at_most(store: TreeStore, threshold: int, use_cache: bool = False) -> int:
    """Sum the totals of all directories whose total is at most threshold."""
    return sum(
        item.size for item in iter_directory_sizes(store, use_cache) if item.size <= threshold
    )


def smallest_directory_at_least(
        store: TreeStore,
        threshold: int,
        use_cache: bool = False,
) -> Optional[DirectorySize]:
    """
    Select the directory with the smallest total that is at least threshold.

    Returns:
        Optional[DirectorySize]: The selected directory, None if no directory
                                 is large enough.
    """
    candidates = (
        item for item in iter_directory_sizes(store, use_cache) if item.size >= threshold
    )
    return min(candidates, key=lambda item: item.size, default=None)


def required_space_to_free(
        used: int,
        disk_capacity: int = DISK_CAPACITY,
        required_free: int = REQUIRED_FREE_SPACE,
) -> int:
    """
    Bytes that must be released so that required_free bytes are available.

    Returns 0 when the disk already has enough free space.
    """
    return max(0, required_free - (disk_capacity - used))
