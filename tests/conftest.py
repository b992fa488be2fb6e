"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from notecorpus.config import CorpusConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep NOTECORPUS_* variables from the developer's shell out of tests."""
    for name in (
        "NOTECORPUS_DIRECTORY",
        "NOTECORPUS_EXTENSIONS",
        "NOTECORPUS_EXCLUDE",
        "NOTECORPUS_BACKENDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Create a small notes tree.

    notes/
        a.org
        b.txt
        sub/c.org.gpg
    """
    root = tmp_path / "notes"
    root.mkdir()
    (root / "a.org").write_text("* A")
    (root / "b.txt").write_text("not a note")
    (root / "sub").mkdir()
    (root / "sub" / "c.org.gpg").write_bytes(b"\x85\x01encrypted")
    return root.resolve()


@pytest.fixture
def config(notes_dir: Path) -> CorpusConfig:
    """Configuration over notes_dir that always uses the built-in walker."""
    return CorpusConfig(
        root_directory=notes_dir,
        extensions=["org"],
        exclude_patterns=None,
        backend_preference=[],
    )
