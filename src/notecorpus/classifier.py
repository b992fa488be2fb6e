"""Corpus membership predicate.

Classification is derived from the path, so it can be applied to paths
reported by external tools, to paths found by the walker, and to paths that
no longer exist. The filesystem is only consulted to resolve symlinks when a
path does not lie lexically under the (already resolved) root directory.
"""

import os
import re
from typing import Optional

from .config import CorpusConfig

# Suffixes appended to a corpus extension by encryption tools
ENCRYPTED_SUFFIXES: tuple[str, ...] = ("gpg", "age")


def file_name_extension(path: str) -> Optional[str]:
    """Return the text after the last dot of the base name.

    Unlike ``os.path.splitext`` this keeps the last segment verbatim and
    treats a leading dot as part of the name, so dotfiles have no extension.

    Examples:
        /notes/a.org -> "org"
        /notes/a.org.gpg -> "gpg"
        /notes/.org -> None
        /notes/README -> None
    """
    name = os.path.basename(path)
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1:]


def base_extension(path: str) -> Optional[str]:
    """Extension of ``path`` with a trailing encryption suffix removed.

    Examples:
        notes.org.gpg -> "org"
        notes.org.age -> "org"
        notes.gpg -> None
    """
    ext = file_name_extension(path)
    if ext in ENCRYPTED_SUFFIXES:
        ext = file_name_extension(path[: -(len(ext) + 1)])
    return ext


def is_descendant_of(path: str, directory: str) -> bool:
    """Check that ``path`` lies strictly inside ``directory``.

    The comparison is lexical: both sides are made absolute and normalized,
    symlinks are not resolved.
    """
    return _relative_to(path, directory) is not None


def _relative_to(path: str, directory: str) -> Optional[str]:
    try:
        relative = os.path.relpath(os.path.abspath(path), os.path.abspath(directory))
    except ValueError:
        # Different drives on Windows
        return None

    if relative == os.curdir or relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return None
    return relative


def matches_exclude(config: CorpusConfig, relative_path: str) -> bool:
    """Check a root-relative path against the configured exclude patterns."""
    patterns = config.exclude_patterns
    if not patterns:
        return False
    if isinstance(patterns, str):
        return re.search(patterns, relative_path) is not None
    return any(re.search(pattern, relative_path) for pattern in patterns)


def is_corpus_file(config: CorpusConfig, path: Optional[str] = None) -> bool:
    """Decide whether ``path`` belongs to the notes corpus.

    Args:
        config: Discovery configuration
        path: Absolute path to classify. ``None`` means the caller could not
            resolve a current file, which is never a corpus file.
            Paths written through a symlink to the root are accepted.

    Returns:
        True if the path is inside the root directory, has one of the
        configured extensions (optionally followed by .gpg or .age) and its
        root-relative path matches no exclude pattern
    """
    if not path:
        return False

    path = os.fspath(path)
    relative = _relative_to(path, config.root)
    if relative is None:
        # Root or a parent directory reached through a symlink
        relative = _relative_to(os.path.realpath(path), config.root)
    if relative is None:
        return False

    if base_extension(path) not in config.extensions:
        return False

    return not matches_exclude(config, relative)
