"""Run external search tools and normalize what they print."""

import logging
import re
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)

# CSI sequences (colors, cursor movement), OSC sequences and two-byte escapes
ANSI_ESCAPE_PATTERN = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])"
)


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences from captured output."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def split_lines(text: str) -> list[str]:
    """Split output on newlines, dropping blank lines."""
    return [line for line in text.split("\n") if line.strip()]


def run_command(command: Sequence[str], cwd: str | None = None) -> list[str]:
    """Run a search command and return the lines it printed.

    The command is executed directly, without a shell, and blocks until it
    exits. Standard error is merged into standard output and the exit status
    is ignored: a failing tool is treated as a tool that found whatever it
    managed to print. Lines are not validated.

    Args:
        command: Argument vector, executable first
        cwd: Working directory for the tool

    Returns:
        Non-blank output lines with escape sequences removed. Empty if the
        executable could not be started at all.
    """
    logger.debug("Running %s", command)
    try:
        result = subprocess.run(
            list(command),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        logger.warning("Could not run %s: %s", command[0], e)
        return []

    if result.returncode != 0:
        logger.debug("%s exited with status %d", command[0], result.returncode)

    return split_lines(strip_ansi(result.stdout or ""))
