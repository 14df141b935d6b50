"""Scribe launcher.

Prepares the writing workspace and environment, then starts the Scribe
session as a child process and exits with its return code:

    scribe-writer [--workspace DIR] [session args...]

Unrecognized arguments are forwarded to the session.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Mapping
import os
from pathlib import Path
import subprocess
import sys
from typing import NoReturn

from rich import print as rprint

from scribe import __version__
from scribe.core.config import (
    NO_RELAUNCH_ENV,
    WORKSPACE_DIR_ENV,
    WRITER_MODE_ENV,
    WriterEnvironment,
    load_environment,
)
from scribe.core.utils import logger, setup_logging
from scribe.modes.types import DEFAULT_MODE

WORKSPACE_DIR_NAME = "my_writings"
DEFAULT_DEBUG_PORT = "5678"
SESSION_MODULE = "scribe"


def parse_launcher_arguments(
    argv: list[str] | None = None,
) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(
        prog="scribe-writer",
        description="Start a Scribe writing session in its own workspace",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help=f"Working directory for the session (default: ./{WORKSPACE_DIR_NAME})",
    )
    return parser.parse_known_args(argv)


def ensure_workspace(path: Path) -> Path:
    """Create the workspace directory if needed and return its absolute path."""
    path = path.resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_child_env(
    workspace: Path, base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """The session's environment: ``base`` (or ours) plus the fixed overlay."""
    env = dict(os.environ if base is None else base)
    env.update({
        "CLI_VERSION": __version__,
        "DEV": "true",
        WRITER_MODE_ENV: DEFAULT_MODE.value,
        WORKSPACE_DIR_ENV: str(workspace),
    })
    return env


def run_build_check(cwd: Path) -> None:
    """Run the install check; raises CalledProcessError when it fails."""
    subprocess.run(
        [sys.executable, "-m", "scribe.cli.build_status"], cwd=cwd, check=True
    )


def get_sandbox_command(cwd: Path) -> str | None:
    """Ask the sandbox helper which sandbox to use; None if there is none."""
    try:
        completed = subprocess.run(
            [sys.executable, "-m", "scribe.cli.sandbox_command"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug("No sandbox command: %s", e)
        return None
    return completed.stdout.strip() or None


def build_debug_args(env: WriterEnvironment, sandbox_command: str | None) -> list[str]:
    """debugpy arguments when ``DEBUG`` is set and we are not sandboxed."""
    if not env.debug_enabled or sandbox_command:
        return []
    if env.sandbox:
        port = env.debug_port or DEFAULT_DEBUG_PORT
        listen = f"0.0.0.0:{port}"
    else:
        listen = DEFAULT_DEBUG_PORT
    return ["-m", "debugpy", "--listen", listen, "--wait-for-client"]


def build_child_command(forwarded: list[str], debug_args: list[str]) -> list[str]:
    return [sys.executable, *debug_args, "-m", SESSION_MODULE, *forwarded]


async def spawn_child(command: list[str], env: Mapping[str, str], cwd: Path) -> int:
    """Start the session with our stdio and wait for it to finish."""
    process = await asyncio.create_subprocess_exec(*command, env=dict(env), cwd=cwd)
    return await process.wait()


def main(argv: list[str] | None = None) -> NoReturn:
    args, forwarded = parse_launcher_arguments(argv)
    setup_logging()

    root = Path.cwd()
    workspace = args.workspace or root / WORKSPACE_DIR_NAME
    rprint("[bold]🚀 Starting Scribe...[/]")
    rprint(f"📂 Workspace: {workspace}")
    workspace = ensure_workspace(workspace)

    child_env = build_child_env(workspace)

    try:
        run_build_check(root)
    except subprocess.CalledProcessError as e:
        rprint("[red]Error: build status check failed.[/]")
        raise SystemExit(e.returncode or 1) from e

    sandbox_command = get_sandbox_command(root)
    env = load_environment()
    debug_args = build_debug_args(env, sandbox_command)
    if env.debug_enabled:
        child_env[NO_RELAUNCH_ENV] = "true"

    command = build_child_command(forwarded, debug_args)
    logger.info("Launching session: %s (cwd=%s)", command, workspace)
    rprint(f"✍️  Starting in {DEFAULT_MODE.value} mode\n")

    exit_code = asyncio.run(spawn_child(command, child_env, workspace))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
