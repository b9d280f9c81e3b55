from __future__ import annotations

"""
Transcript Record Models.

Defines the structured records produced by the transcript parser and
consumed by the tree builder: navigation commands, listing commands and
listing entries.
"""

from dataclasses import dataclass
from typing import Union

ROOT_TARGET = "/"
PARENT_TARGET = ".."

# -----------------------------------------------------------------------------
# COMMAND RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChangeDirectory:
    """
    Navigation record ('$ cd <target>').

    Attributes:
        target: "/" for the root, ".." for the parent, otherwise a child name.
    """
    target: str


@dataclass(frozen=True)
class ListDirectory:
    """Listing command ('$ ls'). Carries no data, entries follow it."""


# -----------------------------------------------------------------------------
# LISTING RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """Listing line announcing a subdirectory ('dir <name>')."""
    name: str


@dataclass(frozen=True)
class FileEntry:
    """Listing line announcing a file ('<size> <name>')."""
    name: str
    size: int


Record = Union[ChangeDirectory, ListDirectory, DirectoryEntry, FileEntry]
