"""Scribe Mode Manager
====================

Coordinates the writer mode system: validating mode switches, deriving
the active configuration, persisting the last-used mode and rendering the
``/mode`` responses.

Delegates to:
- scribe.modes.constants: Static configuration tables
- scribe.modes.persistence: Settings file updates
- scribe.modes.types: Mode enum and state
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
import logging
from pathlib import Path

from scribe.core.config import load_environment
from scribe.modes.constants import (
    MODE_BUNDLES,
    MODE_INFOS,
    MODE_TOOLS,
    MODES_LISTING,
    VALID_MODES,
)
from scribe.modes.persistence import PersistResult, persist_mode_settings
from scribe.modes.types import ModeConfig, ModeState, WriterMode

logger = logging.getLogger(__name__)


def configure_mode(mode: WriterMode, options: Mapping[str, str]) -> ModeConfig:
    """Build the configuration for ``mode`` with ``options`` applied.

    Only the options a mode recognizes change its settings; other keys are
    ignored here.
    """
    bundle = MODE_BUNDLES[mode]
    settings = {
        spec.label: (options.get(spec.option) or spec.default)
        if spec.option
        else spec.default
        for spec in bundle.settings
    }
    return ModeConfig(
        description=bundle.description,
        settings=settings,
        commands=list(bundle.commands),
    )


def list_available_modes() -> str:
    return MODES_LISTING


def get_mode_specific_tools(mode: str | None) -> list[str]:
    """Tool identifiers for ``mode``; pro-writer's for unknown modes."""
    return list(MODE_TOOLS[WriterMode.coerce(mode)])


class ModeManager:
    """Central manager for the writer mode system.

    Example:
        >>> manager = ModeManager(ModeState(mirror_env=False))
        >>> message = asyncio.run(manager.switch_mode("ghostwriter", {}))
        >>> manager.current_mode
        <WriterMode.GHOSTWRITER: 'ghostwriter'>
    """

    def __init__(
        self, state: ModeState | None = None, settings_path: Path | None = None
    ) -> None:
        """Initialize the mode manager.

        Args:
            state: Mode state to drive (defaults to the process-wide state)
            settings_path: Override for the persisted settings file
        """
        self.state = state if state is not None else get_default_mode_state()
        self.settings_path = settings_path
        self.options: dict[str, str] = {}

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def current_mode(self) -> WriterMode:
        return self.state.get()

    @property
    def config(self) -> ModeConfig:
        """Configuration for the current mode and last applied options."""
        return configure_mode(self.current_mode, self.options)

    # -------------------------------------------------------------------------
    # Mode Transitions
    # -------------------------------------------------------------------------

    async def switch_mode(self, requested: str, options: Mapping[str, str]) -> str:
        """Switch to ``requested`` and return the message shown to the user.

        An unknown mode is reported in the returned message and leaves the
        state untouched. Persistence failures are logged, never raised.
        """
        mode = WriterMode.parse(requested)
        if mode is None:
            logger.info("Rejected unknown writer mode %r", requested)
            return f"❌ Invalid mode: {requested}\n\n{list_available_modes()}"

        self.state.set(mode)
        logger.debug("Mode state: %s", self.state.to_dict())
        self.options = dict(options)
        config = configure_mode(mode, self.options)

        result = await asyncio.to_thread(
            persist_mode_settings, mode, self.options, self.settings_path
        )
        self._log_persist_result(result)

        return self._format_switch_message(mode, config)

    @staticmethod
    def _log_persist_result(result: PersistResult) -> None:
        if result.ok:
            logger.debug("Writer settings saved to %s", result.path)
        else:
            logger.debug("Writer settings not saved to %s: %s", result.path, result.error)

    # -------------------------------------------------------------------------
    # Display Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _format_switch_message(mode: WriterMode, config: ModeConfig) -> str:
        settings = "\n".join(f"- {key}: {value}" for key, value in config.settings.items())
        commands = "\n".join(f"- {cmd}" for cmd in config.commands)
        return f"""
✅ **Mode switched to: {mode.value.upper()}**

{config.description}

**Active Settings:**
{settings}

**Available Commands:**
{commands}

**Tip:** Use `/mode show` to see current mode details
"""

    def show_current_mode(self) -> str:
        """Describe the current mode and the display-only settings."""
        mode = self.current_mode
        info = MODE_INFOS[mode]
        env = load_environment()
        tools = "\n".join(f"- {tool}" for tool in info.tools)
        return f"""
📝 **Current Writing Mode: {mode.value.upper()}**

{info.description}

**Available Tools:**
{tools}

**Current Settings:**
- Style Guide: {env.pro_style_guide}
- Language: {env.writer_lang}
- Safety Level: {env.writer_safety}

Use `/mode [mode-name]` to switch modes
Use `/mode list` to see all available modes
"""


# =============================================================================
# PROCESS-WIDE STATE
# =============================================================================

_default_state = ModeState()


def get_default_mode_state() -> ModeState:
    """The mode state shared by callers that do not own one."""
    return _default_state


def reset_default_mode_state() -> ModeState:
    """Drop the shared state so the next read goes back to the environment."""
    global _default_state
    _default_state = ModeState()
    return _default_state


def switch_writer_mode(mode: str) -> None:
    """Set the shared mode without persisting; unknown modes are ignored."""
    parsed = WriterMode.parse(mode)
    if parsed is not None:
        get_default_mode_state().set(parsed)


def get_current_writer_mode() -> WriterMode:
    return get_default_mode_state().get()


__all__ = [
    "VALID_MODES",
    "ModeManager",
    "configure_mode",
    "get_current_writer_mode",
    "get_default_mode_state",
    "get_mode_specific_tools",
    "list_available_modes",
    "reset_default_mode_state",
    "switch_writer_mode",
]
