from __future__ import annotations

"""
Domain Error Hierarchy.

Structural failures raised while resolving paths inside the size tree and
interpretation failures raised while reading a listing transcript.
"""

from typing import Sequence, Tuple


class SizeTreeError(Exception):
    """Base class for every error raised by the sizetree domain."""


# -----------------------------------------------------------------------------
# STRUCTURAL ERRORS
# -----------------------------------------------------------------------------

class TreePathError(SizeTreeError):
    """
    A path could not be resolved to the node an operation requires.

    Attributes:
        path: The full path that was being resolved.
        segment_index: Index of the segment at which resolution stopped.
    """

    def __init__(self, message: str, path: Sequence[str], segment_index: int) -> None:
        super().__init__(message)
        self.path: Tuple[str, ...] = tuple(path)
        self.segment_index = segment_index


class NodeNotFoundError(TreePathError):
    """A path segment does not exist in the hierarchy."""


class NodeNotADirectoryError(TreePathError):
    """A path segment that must be a directory resolves to a file."""


# -----------------------------------------------------------------------------
# TRANSCRIPT ERRORS
# -----------------------------------------------------------------------------

class InvalidRecordError(SizeTreeError):
    """
    A transcript line or record cannot be interpreted.

    Attributes:
        line_number: 1-based line number in the transcript (0 if unknown).
        text: The offending raw text.
    """

    def __init__(self, message: str, line_number: int = 0, text: str = "") -> None:
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.text = text


def format_path(path: Sequence[str]) -> str:
    """Render a tree path for messages, the root being '/'."""
    return "/" + "/".join(path)
