"""Entry point for `python -m scribe` and the `scribe` command."""

from __future__ import annotations

import argparse
import asyncio
import sys

from scribe.core.error_handler import ErrorHandler, MissingSystemPromptFileError
from scribe.core.system_prompt import get_core_system_prompt
from scribe.core.utils import setup_logging
from scribe.modes.manager import ModeManager, get_default_mode_state
from scribe.modes.types import WriterMode


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scribe",
        description="Scribe - writer modes for the agent CLI",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in WriterMode],
        default=None,
        help="Start in this writing mode instead of $SCRIBE_WRITER_MODE",
    )
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the composed system prompt and exit",
    )
    parser.add_argument(
        "--memory",
        default=None,
        help="User memory appended to the printed system prompt",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)
    setup_logging()

    state = get_default_mode_state()
    if args.mode:
        state.set(WriterMode(args.mode))

    if args.print_prompt:
        try:
            prompt = get_core_system_prompt(args.memory, mode_state=state)
        except MissingSystemPromptFileError as e:
            ErrorHandler.display_error(e, context="System Prompt")
            sys.exit(1)
        print(prompt)
        return

    from scribe.cli.repl import ScribeREPL

    repl = ScribeREPL(ModeManager(state))
    asyncio.run(repl.run_async())


if __name__ == "__main__":
    main()
