"""Pick the search backend for a discovery call."""

import logging
import shutil
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .backends import EXTERNAL_BACKENDS, BackendTag, SearchBackend
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedBackend:
    """Backend chosen for one discovery call.

    ``executable`` is None only for the built-in walker.
    """

    tag: BackendTag
    executable: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.tag is BackendTag.WALK

    @property
    def backend(self) -> SearchBackend:
        """Query builder for an external backend."""
        return EXTERNAL_BACKENDS[self.tag]


FALLBACK = ResolvedBackend(tag=BackendTag.WALK)


def parse_entry(entry: Any) -> tuple[str, Optional[str]]:
    """Split a preference entry into its tag and explicit executable.

    Raises:
        TypeError: If the entry is neither a tag nor a (tag, path) pair
    """
    if isinstance(entry, BackendTag):
        return entry.value, None
    if isinstance(entry, str):
        return entry, None
    if (
        isinstance(entry, (tuple, list))
        and len(entry) == 2
        and isinstance(entry[0], str)
        and isinstance(entry[1], str)
    ):
        tag = entry[0].value if isinstance(entry[0], BackendTag) else entry[0]
        return tag, entry[1]
    raise TypeError(
        f"Backend preference entry must be a tag or a (tag, path) pair, got {entry!r}"
    )


def lookup_tag(name: str) -> BackendTag:
    """Map a tag name onto an external backend.

    Raises:
        ConfigurationError: If no external backend has that name
    """
    try:
        tag = BackendTag(name)
    except ValueError:
        tag = None

    if tag is None or tag not in EXTERNAL_BACKENDS:
        raise ConfigurationError(f"{name} is not an implemented search method")
    return tag


def resolve(
    preference: Sequence[Any],
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> ResolvedBackend:
    """Resolve the first usable backend in preference order.

    An explicit executable path is accepted as-is; a bare tag is looked up
    on PATH by its binary name. Entries are checked one at a time, so an
    invalid entry only raises once every entry before it failed to resolve.

    Args:
        preference: Tags or (tag, executable) pairs, most preferred first
        which: PATH lookup function, shutil.which by default

    Returns:
        The first resolved backend, or FALLBACK if none resolves

    Raises:
        TypeError: If a reached entry is malformed
        ConfigurationError: If a reached entry names an unknown backend
    """
    which = which or shutil.which

    for entry in preference:
        name, explicit = parse_entry(entry)
        tag = lookup_tag(name)

        executable = explicit if explicit else which(EXTERNAL_BACKENDS[tag].binary_name)
        if executable:
            logger.debug("Resolved search backend %s at %s", tag.value, executable)
            return ResolvedBackend(tag=tag, executable=executable)

        logger.debug("Search backend %s not found on PATH", tag.value)

    logger.debug("No external search backend resolved, using the built-in walker")
    return FALLBACK
