"""Environment-driven configuration.

Scribe is configured exclusively through environment variables, most of
which are set by the launcher or by the user's shell. ``WriterEnvironment``
is re-read on every call to :func:`load_environment` so that a mode switch
(which updates ``SCRIBE_WRITER_MODE``) is visible to later readers.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

WRITER_MODE_ENV = "SCRIBE_WRITER_MODE"
WORKSPACE_DIR_ENV = "SCRIBE_WORKSPACE_DIR"
SYSTEM_MD_ENV = "SCRIBE_SYSTEM_MD"
WRITE_SYSTEM_MD_ENV = "SCRIBE_WRITE_SYSTEM_MD"
NO_RELAUNCH_ENV = "SCRIBE_CLI_NO_RELAUNCH"

_DISABLED_VALUES = frozenset({"0", "false"})
_DEFAULT_PATH_VALUES = frozenset({"1", "true"})


class WriterEnvironment(BaseSettings):
    """Snapshot of the environment variables Scribe reads."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    writer_mode: str | None = Field(default=None, validation_alias=WRITER_MODE_ENV)

    # Display-only settings shown by ``/mode show``
    pro_style_guide: str = Field(
        default="default", validation_alias="SCRIBE_PRO_STYLE_GUIDE"
    )
    writer_lang: str = Field(default="ko", validation_alias="SCRIBE_WRITER_LANG")
    writer_safety: str = Field(
        default="moderate", validation_alias="SCRIBE_WRITER_SAFETY"
    )

    system_md: str | None = Field(default=None, validation_alias=SYSTEM_MD_ENV)
    write_system_md: str | None = Field(
        default=None, validation_alias=WRITE_SYSTEM_MD_ENV
    )

    # Set inside a sandbox; "sandbox-exec" names macOS Seatbelt
    sandbox: str | None = Field(default=None, validation_alias="SANDBOX")
    # Requested sandbox for the launcher: 0|false, 1|true, or a command name
    sandbox_choice: str | None = Field(default=None, validation_alias="SCRIBE_SANDBOX")
    debug: str | None = Field(default=None, validation_alias="DEBUG")
    debug_port: str | None = Field(default=None, validation_alias="DEBUG_PORT")
    log_level: str | None = Field(default=None, validation_alias="SCRIBE_LOG_LEVEL")

    @property
    def debug_enabled(self) -> bool:
        return bool(self.debug)


def load_environment() -> WriterEnvironment:
    return WriterEnvironment()


class PathToggle(NamedTuple):
    """Parsed form of a ``0|false / 1|true / <path>`` environment variable."""

    enabled: bool
    custom_path: str | None = None


def parse_path_toggle(raw: str | None) -> PathToggle:
    """Interpret a toggle variable, case-insensitively.

    Unset, empty, ``0`` and ``false`` disable; ``1`` and ``true`` enable the
    default path; anything else enables with the raw value as a custom path.
    """
    if not raw:
        return PathToggle(enabled=False)
    lowered = raw.lower()
    if lowered in _DISABLED_VALUES:
        return PathToggle(enabled=False)
    if lowered in _DEFAULT_PATH_VALUES:
        return PathToggle(enabled=True)
    return PathToggle(enabled=True, custom_path=raw)
