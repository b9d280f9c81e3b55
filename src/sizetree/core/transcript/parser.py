from __future__ import annotations

"""
Transcript Parser.

Turns a terminal transcript of 'cd' and 'ls' commands into structured
records. Lines are scanned one at a time; blank lines are skipped and
anything unrecognised fails with InvalidRecordError.
"""

import logging
from typing import Iterable, Iterator, List

from sizetree.domain.errors import InvalidRecordError
from sizetree.domain.transcript_models import (
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListDirectory,
    Record,
)

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "$ "
DIRECTORY_PREFIX = "dir "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_transcript(lines: Iterable[str]) -> Iterator[Record]:
    """
    Lazily parse transcript lines into records.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Yields:
        Record: One record per non-blank line.

    Raises:
        InvalidRecordError: On the first line that cannot be interpreted.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        yield parse_line(line, line_number)


def parse_line(line: str, line_number: int = 0) -> Record:
    """Interpret a single non-blank transcript line."""
    if line.startswith(COMMAND_PREFIX):
        return _parse_command(line[len(COMMAND_PREFIX):].strip(), line, line_number)

    if line.startswith(DIRECTORY_PREFIX):
        name = line[len(DIRECTORY_PREFIX):].strip()
        if not name:
            raise InvalidRecordError("Directory entry without a name", line_number, line)
        return DirectoryEntry(name=name)

    return _parse_file_entry(line, line_number)


def read_transcript(path: str) -> List[Record]:
    """
    Read and parse a transcript file completely.

    Raises:
        OSError: If the file cannot be read.
        InvalidRecordError: If a line cannot be interpreted or the file is
                            not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            records = list(parse_transcript(f))
        except UnicodeDecodeError as e:
            raise InvalidRecordError(
                f"Transcript is not valid UTF-8 (byte offset {e.start}): {e.reason}"
            ) from e
    logger.debug(f"Parsed {len(records)} records from {path}")
    return records

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_command(command: str, line: str, line_number: int) -> Record:
    parts = command.split(maxsplit=1)
    if not parts:
        raise InvalidRecordError("Empty command", line_number, line)

    verb = parts[0]
    if verb == "ls":
        if len(parts) > 1:
            raise InvalidRecordError("'ls' takes no arguments", line_number, line)
        return ListDirectory()
    if verb == "cd":
        if len(parts) < 2:
            raise InvalidRecordError("'cd' requires a target", line_number, line)
        return ChangeDirectory(target=parts[1].strip())

    raise InvalidRecordError(f"Unknown command '{verb}'", line_number, line)


def _parse_file_entry(line: str, line_number: int) -> FileEntry:
    parts = line.split(maxsplit=1)
    if len(parts) != 2:
        raise InvalidRecordError("Expected '<size> <name>'", line_number, line)

    raw_size, name = parts
    if not raw_size.isdecimal():
        raise InvalidRecordError(f"Invalid file size '{raw_size}'", line_number, line)
    return FileEntry(name=name.strip(), size=int(raw_size))
