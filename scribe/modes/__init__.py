"""Scribe Modes Package
=====================

Writer mode system for Scribe.

Architecture:
- types.py: Core type definitions (WriterMode, ModeConfig, ModeInfo, ModeState)
- constants.py: Configuration bundles, mode summaries and listings
- options.py: ``--key value`` option parsing for the /mode command
- persistence.py: Best-effort settings file updates
- prompts.py: Mode-specific system prompt selection
- manager.py: Orchestrator that ties everything together

Usage:
    from scribe.modes import ModeManager, parse_options

    manager = ModeManager()
    message = await manager.switch_mode("ghostwriter", parse_options(["--depth", "light"]))
"""

from __future__ import annotations

# Core types
from scribe.modes.types import DEFAULT_MODE, ModeConfig, ModeInfo, ModeState, WriterMode

# Constants and configurations
from scribe.modes.constants import (
    MODE_BUNDLES,
    MODE_INFOS,
    MODE_PROMPTS,
    MODE_TOOLS,
    VALID_MODES,
)

# Option parsing
from scribe.modes.options import parse_options

# Persistence
from scribe.modes.persistence import PersistResult, persist_mode_settings

# Prompt selection
from scribe.modes.prompts import get_mode_specific_prompt

# Main manager
from scribe.modes.manager import (
    ModeManager,
    configure_mode,
    get_current_writer_mode,
    get_default_mode_state,
    get_mode_specific_tools,
    list_available_modes,
    reset_default_mode_state,
    switch_writer_mode,
)

__all__ = [
    # Types
    "WriterMode",
    "DEFAULT_MODE",
    "ModeConfig",
    "ModeInfo",
    "ModeState",
    # Manager
    "ModeManager",
    # Constants
    "MODE_BUNDLES",
    "MODE_INFOS",
    "MODE_PROMPTS",
    "MODE_TOOLS",
    "VALID_MODES",
    # Functions
    "configure_mode",
    "get_current_writer_mode",
    "get_default_mode_state",
    "get_mode_specific_prompt",
    "get_mode_specific_tools",
    "list_available_modes",
    "parse_options",
    "persist_mode_settings",
    "PersistResult",
    "reset_default_mode_state",
    "switch_writer_mode",
]
