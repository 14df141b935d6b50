from __future__ import annotations

from pathlib import Path

import pytest

from scribe.modes.manager import reset_default_mode_state

_SCRUBBED_ENV = (
    "SCRIBE_WRITER_MODE",
    "SCRIBE_PRO_STYLE_GUIDE",
    "SCRIBE_WRITER_LANG",
    "SCRIBE_WRITER_SAFETY",
    "SCRIBE_SYSTEM_MD",
    "SCRIBE_WRITE_SYSTEM_MD",
    "SCRIBE_SANDBOX",
    "SCRIBE_LOG_LEVEL",
    "SCRIBE_WORKSPACE_DIR",
    "SCRIBE_CLI_NO_RELAUNCH",
    "SANDBOX",
    "DEBUG",
    "DEBUG_PORT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable Scribe reads.

    Each one is set before being deleted so that monkeypatch also undoes
    values written by the code under test (mode switches export
    SCRIBE_WRITER_MODE).
    """
    for name in _SCRUBBED_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temporary folder."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture(autouse=True)
def _fresh_mode_state(_clean_env: None) -> None:
    reset_default_mode_state()


@pytest.fixture
def settings_file(home_dir: Path) -> Path:
    return home_dir / ".scribe" / "writer-settings.json"


@pytest.fixture
def plain_dir(tmp_path: Path) -> Path:
    """A directory outside any git repository."""
    path = tmp_path / "plain"
    path.mkdir()
    return path
