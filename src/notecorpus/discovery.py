"""List every file of the notes corpus."""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .backends import walk_files
from .classifier import is_corpus_file
from .config import CorpusConfig
from .resolver import ResolvedBackend, resolve
from .runner import run_command

logger = logging.getLogger(__name__)


class DiscoveryOutcome(str, Enum):
    """What the external backend produced before the fallback decision."""

    NO_BACKEND_RESOLVED = "no_backend_resolved"
    BACKEND_FOUND_ZERO = "backend_found_zero"
    BACKEND_FOUND_RESULTS = "backend_found_results"


@dataclass
class Discovery:
    """Result of one discovery call.

    ``backend`` is the backend resolved from the preference list. When the
    outcome is anything other than BACKEND_FOUND_RESULTS the files come from
    the built-in walker.
    """

    outcome: DiscoveryOutcome
    backend: ResolvedBackend
    files: list[str] = field(default_factory=list)

    @property
    def used_walker(self) -> bool:
        return self.outcome is not DiscoveryOutcome.BACKEND_FOUND_RESULTS


def validate_paths(config: CorpusConfig, candidates: Iterable[str]) -> list[str]:
    """Keep corpus files among candidate paths, canonicalized.

    Relative candidates are taken relative to the root directory. Each path
    is classified, resolved through symlinks, then classified again so that
    links pointing out of the corpus are dropped. Duplicates are removed,
    first occurrence wins.
    """
    files: list[str] = []
    seen: set[str] = set()

    for candidate in candidates:
        path = os.path.join(config.root, candidate)
        if not is_corpus_file(config, path):
            continue

        canonical = os.path.realpath(path)
        if canonical in seen or not is_corpus_file(config, canonical):
            continue

        seen.add(canonical)
        files.append(canonical)

    return files


def _query_backend(config: CorpusConfig, resolved: ResolvedBackend) -> list[str]:
    command = resolved.backend.build_command(resolved.executable, config.root, config.extensions)
    lines = run_command(command, cwd=config.root)
    return validate_paths(config, lines)


def discover(config: CorpusConfig) -> Discovery:
    """Enumerate corpus files and report how they were found.

    Only the first resolved backend is queried. If nothing resolves, or the
    resolved tool yields no corpus file (including because it failed), the
    built-in walker runs instead and its result is returned as is, even when
    empty.

    Args:
        config: Discovery configuration

    Returns:
        Discovery with the outcome, the resolved backend and the files

    Raises:
        ConfigurationError: If a reached preference entry is unknown
        TypeError: If a reached preference entry is malformed
    """
    resolved = resolve(config.backend_preference)

    if resolved.is_fallback:
        outcome = DiscoveryOutcome.NO_BACKEND_RESOLVED
        files: list[str] = []
    else:
        files = _query_backend(config, resolved)
        if files:
            outcome = DiscoveryOutcome.BACKEND_FOUND_RESULTS
        else:
            outcome = DiscoveryOutcome.BACKEND_FOUND_ZERO

    if outcome is DiscoveryOutcome.BACKEND_FOUND_RESULTS:
        return Discovery(outcome=outcome, backend=resolved, files=files)

    if outcome is DiscoveryOutcome.BACKEND_FOUND_ZERO:
        logger.debug(
            "%s found no corpus files under %s, falling back to the built-in walker",
            resolved.tag.value,
            config.root,
        )

    files = validate_paths(config, walk_files(config))
    return Discovery(outcome=outcome, backend=resolved, files=files)


def list_files(config: CorpusConfig) -> list[str]:
    """Return absolute, symlink-resolved paths of every corpus file."""
    return discover(config).files
