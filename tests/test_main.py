"""Tests for main CLI module."""

import sys
from unittest.mock import patch

import pytest

from gitdiffparser.config import ParseConfig
from gitdiffparser.main import create_parser, main, read_diff
from gitdiffparser.parser import parse_text
from gitdiffparser.settings import get_parse_config


class TestCLI:
    """Test CLI functionality."""

    def test_create_parser(self):
        """Test argument parser creation."""
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args([])

        args = parser.parse_args(["changes.diff"])
        assert args.path == "changes.diff"

    def test_main_success(self, diff_file, capsys):
        """Successful runs print the number of file diffs."""
        with patch.object(sys, "argv", ["gitdiffparser", str(diff_file)]):
            exit_code = main()

        assert exit_code == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "2"

    def test_main_grammar_error(self, tmp_path, capsys):
        """Unparseable input exits non-zero with the failing line."""
        path = tmp_path / "bad.diff"
        path.write_text("diff --git a/a b/a\nnonsense\n", encoding="utf-8")

        with patch.object(sys, "argv", ["gitdiffparser", str(path)]):
            exit_code = main()

        assert exit_code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "GRAMMAR_VIOLATION" in captured.err
        assert "Line 2" in captured.err

    def test_main_path_mismatch(self, tmp_path, capsys):
        """Consistency violations exit non-zero."""
        path = tmp_path / "mismatch.diff"
        path.write_text(
            "\n".join(
                [
                    "diff --git a/a.txt b/a.txt",
                    "index 1..2 100644",
                    "--- a/other.txt",
                    "+++ b/a.txt",
                    "@@ -1 +1 @@",
                    "-x",
                    "+y",
                ]
            ),
            encoding="utf-8",
        )

        with patch.object(sys, "argv", ["gitdiffparser", str(path)]):
            exit_code = main()

        assert exit_code == 1
        assert "PATH_MISMATCH" in capsys.readouterr().err

    def test_main_missing_file(self, tmp_path, capsys):
        """Unreadable paths exit non-zero."""
        missing = tmp_path / "missing.diff"

        with patch.object(sys, "argv", ["gitdiffparser", str(missing)]):
            exit_code = main()

        assert exit_code == 1
        assert "cannot read" in capsys.readouterr().err

    def test_main_empty_file(self, tmp_path, capsys):
        """An empty diff has zero file diffs."""
        path = tmp_path / "empty.diff"
        path.write_text("", encoding="utf-8")

        with patch.object(sys, "argv", ["gitdiffparser", str(path)]):
            exit_code = main()

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_main_keeps_bare_carriage_return(self, tmp_path, capsys):
        """A lone CR inside a hunk line is content, not a line break."""
        path = tmp_path / "cr.diff"
        path.write_bytes(
            b"diff --git a/a.txt b/a.txt\n"
            b"index 1..2 100644\n"
            b"--- a/a.txt\n"
            b"+++ b/a.txt\n"
            b"@@ -1 +1 @@\n"
            b"-old\rtext\n"
            b"+new\n"
        )

        text = read_diff(str(path), ParseConfig())
        assert "-old\rtext\n" in text

        with patch.object(sys, "argv", ["gitdiffparser", str(path)]):
            exit_code = main()

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "1"
        deleted = parse_text(text)[0].chunks[0].lines[0]
        assert deleted.content == "old\rtext"

    def test_main_input_too_large(self, diff_file, monkeypatch, capsys):
        """The configured byte cap applies to files read by the CLI."""
        monkeypatch.setenv("GITDIFF_MAX_INPUT_BYTES", "10")
        get_parse_config.cache_clear()
        try:
            with patch.object(sys, "argv", ["gitdiffparser", str(diff_file)]):
                exit_code = main()
        finally:
            get_parse_config.cache_clear()

        assert exit_code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "INPUT_TOO_LARGE" in captured.err
