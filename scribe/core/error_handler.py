"""Scribe Error Handling
======================

Error types and Rich-formatted error display shared by the REPL and the
launcher.

Usage:
    from scribe.core.error_handler import ErrorHandler

    try:
        prompt = get_core_system_prompt()
    except MissingSystemPromptFileError as e:
        ErrorHandler.display_error(e, context="System Prompt")
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.traceback import Traceback

_console = Console(stderr=True)

COLORS = {
    "error": "#FF4444",
    "warning": "#FFB800",
    "info": "#00D26A",
    "muted": "#666666",
    "primary": "#C9A227",
}


class MissingSystemPromptFileError(FileNotFoundError):
    """The system prompt override is enabled but its file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"missing system prompt file '{path}'")


class ErrorHandler:
    """Rich panels for errors, warnings and notices."""

    @staticmethod
    def display_error(
        error: Exception,
        context: str = "Operation",
        show_traceback: bool = False,
        console: Console | None = None,
    ) -> None:
        """Display a formatted error panel.

        Args:
            error: The exception that occurred
            context: Description of what was happening (e.g., "Mode Switch")
            show_traceback: Whether to show the full traceback
            console: Optional custom console (uses stderr if not provided)
        """
        con = console or _console

        content = Text()
        content.append(f"{type(error).__name__}\n", style=f"bold {COLORS['error']}")
        content.append(str(error), style=COLORS["muted"])

        con.print()
        con.print(
            Panel(
                content,
                title=f"[{COLORS['error']}]❌ {context} Failed[/{COLORS['error']}]",
                border_style=COLORS["error"],
                padding=(1, 2),
            )
        )

        if show_traceback and error.__traceback__:
            con.print()
            con.print(
                Traceback.from_exception(
                    type(error),
                    error,
                    error.__traceback__,
                    show_locals=False,
                    max_frames=10,
                )
            )

    @staticmethod
    def display_warning(
        message: str, context: str = "Warning", console: Console | None = None
    ) -> None:
        con = console or _console
        con.print()
        con.print(
            Panel(
                Text(message, style=COLORS["muted"]),
                title=f"[{COLORS['warning']}]⚠️  {context}[/{COLORS['warning']}]",
                border_style=COLORS["warning"],
                padding=(0, 2),
            )
        )

    @staticmethod
    def format_error_message(error: Exception, context: str = "Error") -> str:
        """Format an error for logging without Rich markup."""
        return f"[{context}] {type(error).__name__}: {error}"


__all__ = ["COLORS", "ErrorHandler", "MissingSystemPromptFileError"]
