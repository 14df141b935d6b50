"""Resolve the sandbox command requested through ``SCRIBE_SANDBOX``.

Run as ``python -m scribe.cli.sandbox_command``: prints the command
(``docker``, ``podman`` or ``sandbox-exec``) and exits 0, or exits 1 when no
sandbox is requested or the requested one is unavailable.
"""

from __future__ import annotations

from collections.abc import Callable
import shutil
import sys

from rich import print as rprint

from scribe.core.config import load_environment

SANDBOX_COMMANDS: tuple[str, ...] = ("docker", "podman", "sandbox-exec")
SEATBELT_COMMAND = "sandbox-exec"


class SandboxConfigError(ValueError):
    """The requested sandbox is unknown or not installed."""


def resolve_sandbox_command(
    choice: str | None,
    platform: str | None = None,
    which: Callable[[str], str | None] | None = None,
) -> str | None:
    """Map a ``SCRIBE_SANDBOX`` value to a command name.

    Returns None when sandboxing is disabled. ``platform`` and ``which``
    default to ``sys.platform`` and ``shutil.which``.

    Raises:
        SandboxConfigError: The value names an unknown command, or the
            requested command is not on PATH
    """
    if not choice:
        return None
    platform = platform or sys.platform
    which = which or shutil.which
    lowered = choice.strip().lower()
    if lowered in {"0", "false"}:
        return None

    if lowered in {"1", "true"}:
        candidates = ["docker", "podman"]
        if platform == "darwin":
            candidates.insert(0, SEATBELT_COMMAND)
        for candidate in candidates:
            if which(candidate):
                return candidate
        raise SandboxConfigError(
            "sandbox requested but no sandbox command was found "
            f"(tried: {', '.join(candidates)})"
        )

    if lowered not in SANDBOX_COMMANDS:
        raise SandboxConfigError(
            f"invalid sandbox command '{choice}', "
            f"expected one of: {', '.join(SANDBOX_COMMANDS)}"
        )
    if not which(lowered):
        raise SandboxConfigError(f"sandbox command '{lowered}' not found on PATH")
    return lowered


def main() -> int:
    try:
        command = resolve_sandbox_command(load_environment().sandbox_choice)
    except SandboxConfigError as e:
        rprint(f"[red]Error: {e}[/]", file=sys.stderr)
        return 1
    if command is None:
        return 1
    print(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
