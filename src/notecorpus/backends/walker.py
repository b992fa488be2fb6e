"""Built-in recursive directory walker.

Used when no external search tool resolves, or when the resolved tool
reports nothing. It needs nothing beyond the standard library, so it is
always available and serves as ground truth for what the tools report.
"""

import logging
import os
import re
from typing import Sequence

from ..classifier import ENCRYPTED_SUFFIXES, is_corpus_file
from ..config import CorpusConfig

logger = logging.getLogger(__name__)


def build_file_pattern(extensions: Sequence[str]) -> re.Pattern[str]:
    r"""Compile the file name pattern for a set of extensions.

    For ["org", "md"] this is ``\.(?:org|md)(?:\.gpg|\.age)?$``.
    """
    alternation = "|".join(re.escape(ext) for ext in extensions)
    encrypted = "|".join(re.escape("." + suffix) for suffix in ENCRYPTED_SUFFIXES)
    return re.compile(rf"\.(?:{alternation})(?:{encrypted})?$")


def walk_files(config: CorpusConfig) -> list[str]:
    """Walk the root directory and return every readable corpus file.

    Symbolic links are followed. A directory reached twice through links is
    only descended once, which also breaks link cycles. Unreadable entries
    are skipped.

    Args:
        config: Discovery configuration

    Returns:
        Absolute paths under the root directory, in walk order
    """
    if not config.extensions:
        return []

    pattern = build_file_pattern(config.extensions)
    results: list[str] = []
    visited: set[str] = set()

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable entry during walk: %s", error)

    for dirpath, dirnames, filenames in os.walk(config.root, onerror=_on_error, followlinks=True):
        real_dir = os.path.realpath(dirpath)
        if real_dir in visited:
            dirnames[:] = []
            continue
        visited.add(real_dir)

        for filename in filenames:
            if not pattern.search(filename):
                continue

            file_path = os.path.join(dirpath, filename)
            if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
                continue

            if is_corpus_file(config, file_path):
                results.append(file_path)

    logger.debug("Walker found %d files under %s", len(results), config.root)
    return results
