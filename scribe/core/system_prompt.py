"""System prompt assembly.

The prompt handed to the agent is the mode-specific template followed by
the shared base template. Two environment variables change this:

- ``SCRIBE_SYSTEM_MD`` replaces the whole prompt body with a file
  (``1``/``true`` for ``~/.scribe/system.md``, or a custom path).
- ``SCRIBE_WRITE_SYSTEM_MD`` writes the computed body out to a file
  (``1``/``true`` for the same default path, or a custom path).
"""

from __future__ import annotations

import logging
from pathlib import Path

from scribe.core.config import WriterEnvironment, load_environment, parse_path_toggle
from scribe.core.error_handler import MissingSystemPromptFileError
from scribe.core.paths import expand_home, get_system_prompt_file
from scribe.core.prompts import SectionPrompt, SystemPrompt, UtilityPrompt
from scribe.modes.manager import get_default_mode_state
from scribe.modes.prompts import get_mode_specific_prompt
from scribe.modes.types import ModeState

logger = logging.getLogger(__name__)

SEATBELT_SANDBOX = "sandbox-exec"
MEMORY_SEPARATOR = "\n\n---\n\n"

# Names of the agent's tools as referenced in the base template
TOOL_NAMES: dict[str, str] = {
    "read_file_tool": "read_file",
    "read_many_files_tool": "read_many_files",
    "write_file_tool": "write_file",
    "edit_tool": "search_replace",
    "grep_tool": "grep",
    "glob_tool": "glob",
    "ls_tool": "list_directory",
    "shell_tool": "bash",
    "memory_tool": "save_memory",
}

_GIT_COMMIT_OFFER = "Would you like me to write a commit message and commit these changes?"


def is_git_repository(directory: Path) -> bool:
    """Whether ``directory`` or one of its parents holds a ``.git`` entry."""
    try:
        current = directory.resolve()
        for candidate in (current, *current.parents):
            if (candidate / ".git").exists():
                return True
    except OSError:
        return False
    return False


def _fill(template: str, values: dict[str, str]) -> str:
    for key, value in values.items():
        template = template.replace("{" + key + "}", value)
    return template


def _sandbox_section(sandbox: str | None) -> str:
    if sandbox == SEATBELT_SANDBOX:
        return SectionPrompt.SANDBOX_SEATBELT.read()
    if sandbox:
        return SectionPrompt.SANDBOX_CONTAINER.read()
    return SectionPrompt.SANDBOX_NONE.read()


def get_base_prompt(
    env: WriterEnvironment | None = None, cwd: Path | None = None
) -> str:
    """The shared template with its sandbox and git sections resolved."""
    env = env or load_environment()
    in_git = is_git_repository(cwd or Path.cwd())
    values = {
        **TOOL_NAMES,
        "sandbox_section": _sandbox_section(env.sandbox),
        "git_section": SectionPrompt.GIT_REPOSITORY.read() if in_git else "",
        "git_commit_offer": _GIT_COMMIT_OFFER if in_git else "",
    }
    return _fill(SystemPrompt.BASE.read(), values)


def _resolve_mode(writer_mode: str | None, mode_state: ModeState | None) -> str:
    if writer_mode:
        return writer_mode
    return (mode_state or get_default_mode_state()).get().value


def _write_prompt(raw: str | None, default_path: Path, body: str) -> None:
    toggle = parse_path_toggle(raw)
    if not toggle.enabled:
        return
    target = expand_home(toggle.custom_path) if toggle.custom_path else default_path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(body, encoding="utf-8")
    logger.debug("System prompt written to %s", target)


def get_core_system_prompt(
    user_memory: str | None = None,
    writer_mode: str | None = None,
    *,
    mode_state: ModeState | None = None,
    cwd: Path | None = None,
) -> str:
    """Compose the system prompt for the agent.

    Args:
        user_memory: Text appended after a horizontal rule when not blank
        writer_mode: Explicit mode; otherwise the mode state decides
        mode_state: Mode state to read (defaults to the process-wide state)
        cwd: Directory checked for a git repository (defaults to the cwd)

    Returns:
        The complete prompt text

    Raises:
        MissingSystemPromptFileError: The override is enabled but its file
            does not exist
    """
    env = load_environment()

    system_md_path = get_system_prompt_file()
    override = parse_path_toggle(env.system_md)
    if override.enabled:
        if override.custom_path:
            system_md_path = expand_home(override.custom_path)
        if not system_md_path.exists():
            raise MissingSystemPromptFileError(system_md_path)

    if override.enabled:
        logger.debug("Using system prompt override from %s", system_md_path)
        base_prompt = system_md_path.read_text(encoding="utf-8")
    else:
        mode = _resolve_mode(writer_mode, mode_state)
        base_prompt = (
            get_mode_specific_prompt(mode) + "\n\n" + get_base_prompt(env, cwd)
        )

    _write_prompt(env.write_system_md, system_md_path, base_prompt)

    if user_memory and user_memory.strip():
        return f"{base_prompt}{MEMORY_SEPARATOR}{user_memory.strip()}"
    return base_prompt


def get_compression_prompt() -> str:
    """Prompt used when the agent compresses its conversation history."""
    return UtilityPrompt.COMPACT.read()
