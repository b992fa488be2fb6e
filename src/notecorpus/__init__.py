"""notecorpus - discover the files that make up a notes directory."""

from .backends import BackendTag
from .classifier import is_corpus_file
from .config import CorpusConfig, get_default_config
from .discovery import Discovery, DiscoveryOutcome, discover, list_files
from .exceptions import ConfigurationError
from .resolver import FALLBACK, ResolvedBackend, resolve

__all__ = [
    "BackendTag",
    "ConfigurationError",
    "CorpusConfig",
    "Discovery",
    "DiscoveryOutcome",
    "FALLBACK",
    "ResolvedBackend",
    "discover",
    "get_default_config",
    "is_corpus_file",
    "list_files",
    "resolve",
]
