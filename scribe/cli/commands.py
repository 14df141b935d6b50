"""Scribe Slash Commands
======================

Slash commands offered to the host session, and the registry that
resolves a typed name or alias to its command.

Usage:
    registry = CommandRegistry()
    command = registry.find_command("/wm")
    result = await command.action(CommandContext(mode_manager), "ghostwriter")
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

from scribe.core.paths import expand_home
from scribe.core.system_prompt import get_core_system_prompt
from scribe.modes.manager import ModeManager, list_available_modes
from scribe.modes.options import parse_options


class CommandKind(StrEnum):
    BUILT_IN = "built-in"


@dataclass
class CommandContext:
    """What a command action may read or change."""

    mode_manager: ModeManager
    user_memory: str | None = None


@dataclass(frozen=True)
class CommandResult:
    content: str
    type: Literal["message"] = "message"
    message_type: Literal["info", "error"] = "info"
    markdown: bool = True


CommandAction = Callable[[CommandContext, str], Awaitable[CommandResult]]


@dataclass(frozen=True)
class SlashCommand:
    name: str
    description: str
    action: CommandAction
    alt_names: tuple[str, ...] = field(default_factory=tuple)
    kind: CommandKind = CommandKind.BUILT_IN

    @property
    def all_names(self) -> tuple[str, ...]:
        return (self.name, *self.alt_names)


# =============================================================================
# /mode
# =============================================================================


async def _writer_mode_action(context: CommandContext, args: str) -> CommandResult:
    tokens = args.split()
    manager = context.mode_manager

    if not tokens or tokens[0] == "show":
        return CommandResult(content=manager.show_current_mode())

    if tokens[0] == "list":
        return CommandResult(content=list_available_modes())

    content = await manager.switch_mode(tokens[0], parse_options(tokens[1:]))
    return CommandResult(content=content)


writer_mode_command = SlashCommand(
    name="mode",
    alt_names=("writer-mode", "wm"),
    description="Switch between different writing modes (pro-writer, ghostwriter, novel-auto)",
    action=_writer_mode_action,
)


# =============================================================================
# /prompt
# =============================================================================


async def _prompt_action(context: CommandContext, args: str) -> CommandResult:
    """Show the composed system prompt, or save it when a path is given."""
    prompt = get_core_system_prompt(
        context.user_memory, mode_state=context.mode_manager.state
    )
    target = args.strip()
    if not target:
        return CommandResult(content=prompt, markdown=False)

    path = expand_home(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(prompt, encoding="utf-8")
    return CommandResult(content=f"System prompt saved to `{path}`")


prompt_command = SlashCommand(
    name="prompt",
    alt_names=("system-prompt",),
    description="Show the current system prompt, or save it with /prompt <path>",
    action=_prompt_action,
)


# =============================================================================
# REGISTRY
# =============================================================================


BUILT_IN_COMMANDS: tuple[SlashCommand, ...] = (writer_mode_command, prompt_command)


class CommandRegistry:
    """Resolves ``/name`` or any alias to a :class:`SlashCommand`."""

    def __init__(self, commands: Iterable[SlashCommand] | None = None) -> None:
        self.commands: list[SlashCommand] = list(
            BUILT_IN_COMMANDS if commands is None else commands
        )
        self._by_name: dict[str, SlashCommand] = {}
        for command in self.commands:
            for name in command.all_names:
                self._by_name[name.lower()] = command

    def find_command(self, name: str) -> SlashCommand | None:
        return self._by_name.get(name.strip().lstrip("/").lower())

    def help_text(self) -> str:
        lines = ["**Commands:**", ""]
        for command in self.commands:
            aliases = ", ".join(f"`/{alt}`" for alt in command.alt_names)
            suffix = f" (aliases: {aliases})" if aliases else ""
            lines.append(f"- `/{command.name}` - {command.description}{suffix}")
        lines.append("- `/help` - Show this help")
        lines.append("- `/quit` - Leave the session")
        return "\n".join(lines)
