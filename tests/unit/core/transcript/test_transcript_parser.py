from __future__ import annotations

"""
Unit tests for the Transcript Parser.

Verifies recognition of every record kind and loud failure on malformed
lines, with line numbers preserved.
"""

from pathlib import Path

import pytest

from sizetree.core.transcript.parser import parse_line, parse_transcript, read_transcript
from sizetree.domain.errors import InvalidRecordError
from sizetree.domain.transcript_models import (
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListDirectory,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("$ cd /", ChangeDirectory(target="/")),
        ("$ cd ..", ChangeDirectory(target="..")),
        ("$ cd a", ChangeDirectory(target="a")),
        ("$ ls", ListDirectory()),
        ("dir e", DirectoryEntry(name="e")),
        ("62596 h.lst", FileEntry(name="h.lst", size=62596)),
        ("0 empty.bin", FileEntry(name="empty.bin", size=0)),
    ],
)
def test_parse_line_recognizes_records(line, expected) -> None:
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "abc h.lst",
        "-5 negative.txt",
        "² superscript.txt",
        "12345",
        "$ rm -rf /",
        "$ cd",
        "$ ls -la",
        "dir ",
    ],
)
def test_parse_line_rejects_malformed_input(line) -> None:
    with pytest.raises(InvalidRecordError):
        parse_line(line)


def test_parse_transcript_reference(example_transcript: str) -> None:
    records = list(parse_transcript(example_transcript.splitlines(keepends=True)))
    assert len(records) == 23
    assert records[0] == ChangeDirectory("/")
    assert records[3] == FileEntry("b.txt", 14848514)
    assert records[-1] == FileEntry("k", 7214296)


def test_parse_transcript_skips_blank_lines_and_reports_line_number() -> None:
    lines = ["$ cd /\n", "\n", "$ ls\n", "oops size\n"]
    parsed = parse_transcript(lines)

    assert next(parsed) == ChangeDirectory("/")
    assert next(parsed) == ListDirectory()
    with pytest.raises(InvalidRecordError) as exc_info:
        next(parsed)

    assert exc_info.value.line_number == 4
    assert exc_info.value.text == "oops size"
    assert "line 4" in str(exc_info.value)


def test_read_transcript_from_file(transcript_file: Path) -> None:
    records = read_transcript(str(transcript_file))
    assert records[1] == ListDirectory()
    assert DirectoryEntry("d") in records


def test_read_transcript_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_transcript(str(tmp_path / "missing.txt"))


def test_read_transcript_rejects_invalid_utf8(tmp_path: Path) -> None:
    bad = tmp_path / "binary.txt"
    bad.write_bytes(b"$ cd /\n\xff\xfe\n")

    with pytest.raises(InvalidRecordError) as exc_info:
        read_transcript(str(bad))

    assert "UTF-8" in str(exc_info.value)
