"""Pytest configuration and fixtures for gitdiffparser tests."""

from pathlib import Path
from typing import List

import pytest

MODIFIED_FILE = [
    "diff --git a/foo.txt b/foo.txt",
    "index e69de29..4b825dc 100644",
    "--- a/foo.txt",
    "+++ b/foo.txt",
    "@@ -1,2 +1,3 @@",
    " line1",
    "-line2",
    "+line2 modified",
    "+line3",
]

NEW_FILE = [
    "diff --git a/new.py b/new.py",
    "new file mode 100644",
    "index 0000000..3b18e51",
    "--- /dev/null",
    "+++ b/new.py",
    "@@ -0,0 +1,2 @@",
    "+import os",
    "+print(os.getcwd())",
]

DELETED_FILE = [
    "diff --git a/old.py b/old.py",
    "deleted file mode 100755",
    "index 3b18e51..0000000",
    "--- a/old.py",
    "+++ /dev/null",
    "@@ -1 +0,0 @@",
    "-#!/bin/sh",
]

MODE_CHANGE = [
    "diff --git a/run.sh b/run.sh",
    "old mode 100644",
    "new mode 100755",
]

RENAME = [
    "diff --git a/src/a.py b/src/b.py",
    "similarity index 100%",
    "rename from src/a.py",
    "rename to src/b.py",
]

BINARY = [
    "diff --git a/logo.png b/logo.png",
    "index 1c2d3e4..5f6a7b8 100644",
    "Binary files a/logo.png and b/logo.png differ",
]

NO_TRAILING_NEWLINE = [
    "diff --git a/notes.md b/notes.md",
    "index 1111111..2222222 100644",
    "--- a/notes.md",
    "+++ b/notes.md",
    "@@ -1,2 +1,2 @@",
    " title",
    "-body",
    "+body edited",
    "\\ No newline at end of file",
]


@pytest.fixture
def modified_file_lines() -> List[str]:
    """Single modified file with one hunk."""
    return list(MODIFIED_FILE)


@pytest.fixture
def multi_file_lines() -> List[str]:
    """Several files of different kinds in one diff."""
    return MODIFIED_FILE + NEW_FILE + DELETED_FILE + MODE_CHANGE + RENAME + BINARY


@pytest.fixture
def no_newline_lines() -> List[str]:
    """File whose new version lacks a trailing newline."""
    return list(NO_TRAILING_NEWLINE)


@pytest.fixture
def diff_file(tmp_path: Path) -> Path:
    """Diff text written to a temporary file."""
    path = tmp_path / "changes.diff"
    path.write_text("\n".join(MODIFIED_FILE + NEW_FILE) + "\n", encoding="utf-8")
    return path
