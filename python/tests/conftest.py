"""
Pytest configuration and fixtures for snip tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from snip.store import SnippetStore  # noqa: E402


@pytest.fixture(autouse=True)
def snip_home(tmp_path, monkeypatch):
    """Keep every test away from the real user data directory."""
    home = tmp_path / "snip-home"
    monkeypatch.setenv("SNIP_HOME", str(home))
    return home


@pytest.fixture
def store(tmp_path):
    handle = SnippetStore.open(tmp_path / "data" / "snip.db")
    try:
        yield handle
    finally:
        handle.close()


@pytest.fixture
def seeded_store(store):
    for command in ("git status", "git log", "ls -la"):
        store.save(command)
    return store
