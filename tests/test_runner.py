"""Tests for running search tools and normalizing their output."""

import subprocess
import sys
from unittest.mock import Mock, patch

from notecorpus.runner import run_command, split_lines, strip_ansi


class TestStripAnsi:
    """Terminal escape removal."""

    def test_color_codes(self):
        assert strip_ansi("\x1b[35m/notes/a.org\x1b[0m") == "/notes/a.org"

    def test_bold_and_multi_params(self):
        assert strip_ansi("\x1b[1;34m/notes\x1b[0m/\x1b[01;32ma.org\x1b[m") == "/notes/a.org"

    def test_hyperlink_sequences(self):
        text = "\x1b]8;;file:///notes/a.org\x1b\\/notes/a.org\x1b]8;;\x1b\\"
        assert strip_ansi(text) == "/notes/a.org"

    def test_plain_text_untouched(self):
        assert strip_ansi("/notes/[draft] a.org") == "/notes/[draft] a.org"


class TestSplitLines:
    """Line splitting drops blank lines only."""

    def test_drops_blank_lines(self):
        assert split_lines("/a.org\n\n/b.org\n   \n") == ["/a.org", "/b.org"]

    def test_empty_output(self):
        assert split_lines("") == []

    def test_keeps_inner_spaces(self):
        assert split_lines("/notes/my note.org\n") == ["/notes/my note.org"]


class TestRunCommand:
    """Synchronous execution without a shell."""

    @patch("notecorpus.runner.subprocess.run")
    def test_invokes_argv_without_shell(self, mock_run):
        mock_run.return_value = Mock(stdout="/notes/a.org\n", returncode=0)

        lines = run_command(["rg", "-L", "/notes", "--files"], cwd="/notes")

        assert lines == ["/notes/a.org"]
        mock_run.assert_called_once_with(
            ["rg", "-L", "/notes", "--files"],
            cwd="/notes",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )

    @patch("notecorpus.runner.subprocess.run")
    def test_nonzero_exit_output_still_used(self, mock_run):
        mock_run.return_value = Mock(
            stdout="/notes/a.org\nfind: '/notes/locked': Permission denied\n",
            returncode=1,
        )

        lines = run_command(["find", "/notes"])

        assert lines == ["/notes/a.org", "find: '/notes/locked': Permission denied"]

    @patch("notecorpus.runner.subprocess.run")
    def test_strips_colors(self, mock_run):
        mock_run.return_value = Mock(stdout="\x1b[35m/notes/a.org\x1b[0m\n", returncode=0)

        assert run_command(["fd"]) == ["/notes/a.org"]

    @patch("notecorpus.runner.subprocess.run")
    def test_missing_executable_yields_nothing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("no such file")

        assert run_command(["/nonexistent/rg"]) == []

    def test_real_process(self, tmp_path):
        lines = run_command(
            [sys.executable, "-c", "print('one'); print(); print('two')"],
            cwd=str(tmp_path),
        )

        assert lines == ["one", "two"]
