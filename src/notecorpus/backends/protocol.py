"""Protocol definition for external search backends."""

from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

from ..classifier import ENCRYPTED_SUFFIXES


class BackendTag(str, Enum):
    """Closed set of search backends.

    ``WALK`` is the built-in directory walker. It is never listed in a
    preference list; resolution falls back to it when nothing else resolves.
    """

    FIND = "find"
    FD = "fd"
    FDFIND = "fdfind"
    RG = "rg"
    WALK = "walk"


def suffix_forms(extensions: Sequence[str]) -> list[str]:
    """Expand extensions into every literal suffix a backend must match.

    Examples:
        ["org"] -> ["org", "org.gpg", "org.age"]
        ["org", "md"] -> ["org", "org.gpg", "org.age", "md", "md.gpg", "md.age"]
    """
    forms: list[str] = []
    for ext in extensions:
        forms.append(ext)
        forms.extend(f"{ext}.{suffix}" for suffix in ENCRYPTED_SUFFIXES)
    return forms


@runtime_checkable
class SearchBackend(Protocol):
    """Protocol for external file search tools.

    A backend knows the binary it runs as and how to turn a root directory
    and an extension list into an argument vector for that binary. Commands
    must follow symbolic links, search recursively and list files only.
    """

    @property
    def tag(self) -> BackendTag:
        """Tag this backend is registered under."""
        ...

    @property
    def binary_name(self) -> str:
        """Name looked up on PATH when no explicit executable is given."""
        ...

    def build_command(
        self,
        executable: str,
        root_directory: str,
        extensions: Sequence[str],
    ) -> list[str]:
        """Build the command that lists candidate corpus files.

        Args:
            executable: Resolved path of the search tool
            root_directory: Absolute directory to search
            extensions: Corpus extensions without the leading dot

        Returns:
            Argument vector suitable for ``subprocess.run`` without a shell
        """
        ...
