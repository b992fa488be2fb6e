"""Configuration management for corpus discovery."""

import os
import re
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


load_dotenv()


DEFAULT_ROOT_DIRECTORY = "~/org-roam"

DEFAULT_EXTENSIONS = ("org",)

# Attachment directory created inside the notes tree
DEFAULT_EXCLUDE_PATTERNS = "data/"

# A preference entry is a backend tag or a (tag, executable path) pair
BackendEntry = Union[str, tuple[str, str]]


def default_backend_preference() -> tuple[BackendEntry, ...]:
    """Search tools to try, in order, on this platform.

    Windows and DOS-like systems rarely ship POSIX find, so discovery goes
    straight to the built-in walker there.
    """
    if sys.platform in ("win32", "cygwin", "msys"):
        return ()
    return ("find", "fd", "fdfind", "rg")


class CorpusConfig(BaseModel):
    """Parameters of one discovery call.

    Frozen once built; sequence fields are stored as tuples so they cannot be
    mutated in place either.
    """

    model_config = ConfigDict(frozen=True)

    root_directory: Path
    extensions: tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS)
    exclude_patterns: Optional[Union[str, tuple[str, ...]]] = Field(default=DEFAULT_EXCLUDE_PATTERNS)
    backend_preference: tuple[BackendEntry, ...] = Field(default_factory=default_backend_preference)

    @field_validator("root_directory")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("exclude_patterns")
    @classmethod
    def _compilable_patterns(cls, value):
        patterns = (value,) if isinstance(value, str) else (value or ())
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern {pattern!r}: {e}") from e
        return value

    @property
    def root(self) -> str:
        """Root directory as a plain string."""
        return str(self.root_directory)

    @classmethod
    def from_env(cls) -> "CorpusConfig":
        """Load configuration from environment variables.

        Environment Variables:
            NOTECORPUS_DIRECTORY: Root of the notes tree
            NOTECORPUS_EXTENSIONS: Comma-separated extensions (e.g. "org,md")
            NOTECORPUS_EXCLUDE: Comma-separated exclude regexes, empty to disable
            NOTECORPUS_BACKENDS: Comma-separated entries, "tag" or "tag=/path/to/exe",
                empty to force the built-in walker
        """
        def _split(value: str) -> list[str]:
            return [entry.strip() for entry in value.split(",") if entry.strip()]

        extensions: list[str] = list(DEFAULT_EXTENSIONS)
        extensions_env = os.getenv("NOTECORPUS_EXTENSIONS")
        if extensions_env:
            extensions = _split(extensions_env)

        exclude_patterns: Optional[Union[str, list[str]]] = DEFAULT_EXCLUDE_PATTERNS
        exclude_env = os.getenv("NOTECORPUS_EXCLUDE")
        if exclude_env is not None:
            patterns = _split(exclude_env)
            exclude_patterns = patterns or None

        backend_preference = list(default_backend_preference())
        backends_env = os.getenv("NOTECORPUS_BACKENDS")
        if backends_env is not None:
            backend_preference = [parse_backend_entry(entry) for entry in _split(backends_env)]

        return cls(
            root_directory=Path(os.getenv("NOTECORPUS_DIRECTORY", DEFAULT_ROOT_DIRECTORY)),
            extensions=extensions,
            exclude_patterns=exclude_patterns,
            backend_preference=backend_preference,
        )


def parse_backend_entry(entry: str) -> BackendEntry:
    """Parse "rg" or "rg=/opt/bin/rg" into a preference entry."""
    tag, sep, executable = entry.partition("=")
    if sep and executable.strip():
        return (tag.strip(), executable.strip())
    return tag.strip()


@lru_cache(maxsize=1)
def get_default_config() -> CorpusConfig:
    """Process-wide configuration built from the environment on first use.

    The engine never reads this itself; it exists for callers such as the CLI.
    """
    return CorpusConfig.from_env()
