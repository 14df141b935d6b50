"""Best-effort persistence of the last-used writer mode.

The mode itself lives in :class:`~scribe.modes.types.ModeState`; the file
at ``~/.scribe/writer-settings.json`` only records it for later sessions.
Failures are reported through :class:`PersistResult` instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
import json
import logging
from pathlib import Path
from typing import Any

from scribe.core.paths import get_settings_file
from scribe.modes.types import WriterMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistResult:
    ok: bool
    path: Path
    error: str | None = None


def load_settings_document(path: Path) -> dict[str, Any]:
    """Read the settings document, or return an empty one.

    A missing file, unreadable file, malformed JSON and a top-level value
    that is not an object all yield ``{}``.
    """
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring non-object settings document in %s", path)
        return {}
    return data


def persist_mode_settings(
    mode: WriterMode,
    options: Mapping[str, str],
    settings_path: Path | None = None,
) -> PersistResult:
    """Merge the current mode into the settings document and write it back.

    Keys other than ``currentMode``, ``modeOptions`` and ``lastUpdated`` are
    preserved. Never raises.
    """
    path = settings_path or get_settings_file()
    try:
        settings = load_settings_document(path)
        settings["currentMode"] = mode.value
        settings["modeOptions"] = dict(options)
        settings["lastUpdated"] = datetime.now(UTC).isoformat()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(settings, indent=2, ensure_ascii=False), encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Could not update settings file %s: %s", path, e)
        return PersistResult(ok=False, path=path, error=str(e))

    return PersistResult(ok=True, path=path)
