from __future__ import annotations

"""
Tree Builder.

Replays transcript records against a TreeStore. The builder keeps a
single current working directory; navigation never creates nodes, and
listing entries are inserted into the current directory.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from sizetree.core.tree.store import TreeStore, new_directory, new_file
from sizetree.domain.errors import InvalidRecordError, format_path
from sizetree.domain.transcript_models import (
    PARENT_TARGET,
    ROOT_TARGET,
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListDirectory,
    Record,
)

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Incremental constructor of a size tree.

    Args:
        store: Store receiving the nodes. A new empty one is used when omitted.
    """

    def __init__(self, store: Optional[TreeStore] = None) -> None:
        self.store = store if store is not None else TreeStore()
        self._cwd: List[str] = []

    @property
    def cwd(self) -> Tuple[str, ...]:
        return tuple(self._cwd)

    def apply(self, record: Record) -> None:
        """
        Apply one record to the tree.

        Raises:
            NodeNotFoundError: Navigation into a directory that was never listed.
            NodeNotADirectoryError: Navigation into a file.
            InvalidRecordError: Navigation above the root or an unknown record.
        """
        if isinstance(record, ChangeDirectory):
            self._change_directory(record.target)
        elif isinstance(record, ListDirectory):
            return
        elif isinstance(record, DirectoryEntry):
            self.store.insert_at(self._cwd, record.name, new_directory())
        elif isinstance(record, FileEntry):
            try:
                node = new_file(record.size)
            except ValueError as e:
                raise InvalidRecordError(str(e), text=record.name) from e
            self.store.insert_at(self._cwd, record.name, node)
        else:
            raise InvalidRecordError(f"Unsupported record type: {type(record).__name__}")

    def apply_all(self, records: Iterable[Record]) -> TreeStore:
        count = 0
        for record in records:
            self.apply(record)
            count += 1
        logger.debug(f"Applied {count} records, cwd is {format_path(self._cwd)}")
        return self.store

    def _change_directory(self, target: str) -> None:
        if target == ROOT_TARGET:
            self._cwd.clear()
            return

        if target == PARENT_TARGET:
            if not self._cwd:
                raise InvalidRecordError("Cannot change to the parent of the root", text=target)
            self._cwd.pop()
            return

        candidate = self._cwd + [target]
        # Raises when the target was never listed or is a file
        self.store.directory_at(candidate)
        self._cwd = candidate


def build_tree(records: Iterable[Record]) -> TreeStore:
    """Build a new TreeStore from a complete record stream."""
    return TreeBuilder().apply_all(records)
