"""Scribe Mode Types
==================

Core type definitions for the writer mode system.

This module contains:
- WriterMode enum: The three writing modes
- ModeConfig: Derived configuration shown after a switch
- ModeInfo: Summary shown by ``/mode show``
- ModeState: Runtime owner of the current mode
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
import os
from typing import Any

from scribe.core.config import WRITER_MODE_ENV

# =============================================================================
# ENUMS
# =============================================================================


class WriterMode(StrEnum):
    """The three writing modes.

    Each mode selects a system prompt template, a settings bundle and a set
    of example commands.
    """

    PRO_WRITER = "pro-writer"  # Professional writing & research
    GHOSTWRITER = "ghostwriter"  # Voice mimicry & collaboration
    NOVEL_AUTO = "novel-auto"  # World-building & story generation

    @classmethod
    def parse(cls, value: str | None) -> WriterMode | None:
        """Return the matching mode, or None for anything unrecognized."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def coerce(cls, value: str | None) -> WriterMode:
        """Like :meth:`parse`, but unknown values read as PRO_WRITER."""
        return cls.parse(value) or DEFAULT_MODE


DEFAULT_MODE = WriterMode.PRO_WRITER


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass
class ModeConfig:
    """Configuration derived from a mode and its options."""

    description: str
    settings: dict[str, str]
    commands: list[str]


@dataclass(frozen=True)
class ModeInfo:
    """Short description and tool list for a mode."""

    description: str
    tools: tuple[str, ...]


@dataclass
class ModeState:
    """Owner of the current writer mode.

    The mode is read from ``SCRIBE_WRITER_MODE`` the first time it is
    needed. Setting it mirrors the value back into the environment so that
    child processes start in the same mode.

    Attributes:
        current_mode: The active mode, or None until first read
        mirror_env: Whether set() writes the environment variable
        started_at: When the current mode was activated
        mode_history: Log of mode transitions with timestamps
    """

    current_mode: WriterMode | None = None
    mirror_env: bool = True
    started_at: datetime = field(default_factory=datetime.now)
    mode_history: list[tuple[WriterMode, datetime]] = field(default_factory=list)

    def get(self) -> WriterMode:
        if self.current_mode is None:
            self.current_mode = WriterMode.coerce(os.environ.get(WRITER_MODE_ENV))
            self.mode_history.append((self.current_mode, self.started_at))
        return self.current_mode

    def set(self, mode: WriterMode) -> None:
        now = datetime.now()
        self.current_mode = mode
        self.started_at = now
        self.mode_history.append((mode, now))
        if self.mirror_env:
            os.environ[WRITER_MODE_ENV] = mode.value

    def to_dict(self) -> dict[str, Any]:
        """Serialize state for logging/debugging."""
        return {
            "mode": self.get().value,
            "started_at": self.started_at.isoformat(),
            "transitions": len(self.mode_history),
        }
