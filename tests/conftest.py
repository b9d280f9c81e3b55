from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the per-user data directory and of the logging state.
3. Shared fixtures for the reference tree and its transcript.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sizetree.core.tree.store import TreeStore, new_directory, new_file  # noqa: E402
from sizetree.infra.fs import DATA_DIR_ENV  # noqa: E402
from sizetree.infra.logging import reset_logging  # noqa: E402

EXAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# -----------------------------------------------------------------------------
# Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the user data directory at a per-test folder."""
    data_dir = tmp_path / "sizetree-data"
    monkeypatch.setenv(DATA_DIR_ENV, str(data_dir))
    yield data_dir
    reset_logging()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def example_store() -> TreeStore:
    """
    The reference tree:

    /
      a/        e/i=584, f=29116, g=2557, h.lst=62596
      b.txt     14848514
      c.dat     8504156
      d/        j=4060174, d.log=8033020, d.ext=5626152, k=7214296
    """
    root = new_directory({
        "a": new_directory({
            "e": new_directory({"i": new_file(584)}),
            "f": new_file(29116),
            "g": new_file(2557),
            "h.lst": new_file(62596),
        }),
        "b.txt": new_file(14848514),
        "c.dat": new_file(8504156),
        "d": new_directory({
            "j": new_file(4060174),
            "d.log": new_file(8033020),
            "d.ext": new_file(5626152),
            "k": new_file(7214296),
        }),
    })
    return TreeStore(root)


@pytest.fixture
def example_transcript() -> str:
    return EXAMPLE_TRANSCRIPT


@pytest.fixture
def transcript_file(tmp_path: Path) -> Path:
    """The reference transcript written to disk."""
    path = tmp_path / "transcript.txt"
    path.write_text(EXAMPLE_TRANSCRIPT, encoding="utf-8")
    return path
