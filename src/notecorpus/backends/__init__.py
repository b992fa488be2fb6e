"""Search backends for corpus discovery.

This module provides the closed set of backends the engine can use:
- External tools (find, fd, fdfind, rg) that build a command line
- The built-in directory walker, always available as the last resort
"""

from .protocol import BackendTag, SearchBackend, ENCRYPTED_SUFFIXES, suffix_forms
from .find import FindBackend
from .fd import FdBackend, FdFindBackend
from .ripgrep import RipgrepBackend
from .walker import walk_files, build_file_pattern

# Every external tag maps to exactly one strategy; WALK has no command line
EXTERNAL_BACKENDS: dict[BackendTag, SearchBackend] = {
    BackendTag.FIND: FindBackend(),
    BackendTag.FD: FdBackend(),
    BackendTag.FDFIND: FdFindBackend(),
    BackendTag.RG: RipgrepBackend(),
}

__all__ = [
    "BackendTag",
    "SearchBackend",
    "ENCRYPTED_SUFFIXES",
    "EXTERNAL_BACKENDS",
    "FindBackend",
    "FdBackend",
    "FdFindBackend",
    "RipgrepBackend",
    "suffix_forms",
    "walk_files",
    "build_file_pattern",
]
