"""Filesystem locations used by Scribe.

Everything lives under ``~/.scribe``. Paths are computed on each call so
that a patched home directory (tests, sandboxes) is honored.
"""

from __future__ import annotations

from pathlib import Path

SCRIBE_DIR_NAME = ".scribe"
SETTINGS_FILENAME = "writer-settings.json"
SYSTEM_PROMPT_FILENAME = "system.md"
LOG_FILENAME = "scribe.log"


def get_scribe_home() -> Path:
    return Path.home() / SCRIBE_DIR_NAME


def get_settings_file() -> Path:
    return get_scribe_home() / SETTINGS_FILENAME


def get_system_prompt_file() -> Path:
    return (get_scribe_home() / SYSTEM_PROMPT_FILENAME).resolve()


def get_log_dir() -> Path:
    return get_scribe_home() / "logs"


def expand_home(raw: str) -> Path:
    """Expand a leading ``~/`` or a bare ``~`` and resolve to an absolute path.

    Only those two forms are expanded; ``~user`` is left untouched.
    """
    if raw.startswith("~/"):
        path = Path.home() / raw[2:]
    elif raw == "~":
        path = Path.home()
    else:
        path = Path(raw)
    return path.resolve()
