"""Scribe REPL
============

The interactive host session started by the launcher. It shows the
current writer mode in the prompt and dispatches slash commands; the
conversation itself belongs to the agent runtime.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markdown import Markdown

from scribe.cli.commands import CommandContext, CommandRegistry, CommandResult
from scribe.core.error_handler import COLORS, ErrorHandler
from scribe.modes.manager import ModeManager

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"/exit", "/quit", "exit", "quit"})


class ScribeREPL:
    """Prompt loop hosting the writer slash commands."""

    def __init__(
        self,
        mode_manager: ModeManager | None = None,
        registry: CommandRegistry | None = None,
        console: Console | None = None,
    ) -> None:
        self.mode_manager = mode_manager or ModeManager()
        self.registry = registry or CommandRegistry()
        self.console = console or Console()
        self.context = CommandContext(mode_manager=self.mode_manager)

        words = ["/help", "/quit"]
        for command in self.registry.commands:
            words.extend(f"/{name}" for name in command.all_names)

        self.style = Style.from_dict({
            "mode": f"bg:{COLORS['primary']} #1a1a1a bold",
            "prompt": COLORS["muted"],
        })
        self.session: PromptSession[str] = PromptSession(
            style=self.style,
            completer=WordCompleter(words, sentence=True),
        )

    def _prompt_tokens(self) -> list[tuple[str, str]]:
        mode = self.mode_manager.current_mode.value.upper()
        return [("class:mode", f" ✍ {mode} "), ("class:prompt", " › ")]

    def render(self, result: CommandResult) -> None:
        self.console.print()
        if result.markdown:
            self.console.print(Markdown(result.content.strip()))
        else:
            self.console.print(result.content, markup=False, highlight=False, soft_wrap=True)
        self.console.print()

    async def handle_command(self, line: str) -> None:
        """Dispatch one slash command line."""
        parts = line.split(maxsplit=1)
        name = parts[0]
        args = parts[1] if len(parts) > 1 else ""

        if name.lower() in {"/help", "/h", "/?"}:
            self.render(CommandResult(content=self.registry.help_text()))
            return

        command = self.registry.find_command(name)
        if command is None:
            ErrorHandler.display_warning(
                f"Unknown command: {name}\nType /help for the list of commands",
                context="Unknown Command",
                console=self.console,
            )
            return

        try:
            result = await command.action(self.context, args)
        except (OSError, ValueError) as e:
            logger.warning(ErrorHandler.format_error_message(e, f"/{command.name}"))
            ErrorHandler.display_error(e, context=f"/{command.name}", console=self.console)
            return
        self.render(result)

    async def run_async(self) -> NoReturn:
        """Run the prompt loop until the user leaves."""
        self.console.print(
            f"[{COLORS['primary']}]✍  Scribe[/{COLORS['primary']}] "
            f"[{COLORS['muted']}]- type /help for commands, /quit to leave[/{COLORS['muted']}]\n"
        )
        while True:
            try:
                with patch_stdout():
                    line = await self.session.prompt_async(self._prompt_tokens)
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                sys.exit(0)

            line = line.strip()
            if not line:
                continue
            if line.lower() in EXIT_COMMANDS:
                sys.exit(0)
            if line.startswith("/"):
                await self.handle_command(line)
                continue

            self.console.print(
                f"  [{COLORS['muted']}]Messages are handled by the agent runtime; "
                f"use /prompt to export the system prompt for it.[/{COLORS['muted']}]\n"
            )
