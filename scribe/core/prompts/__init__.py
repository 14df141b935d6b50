from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from scribe import SCRIBE_ROOT

_PROMPTS_DIR = SCRIBE_ROOT / "core" / "prompts"


class Prompt(StrEnum):
    @property
    def path(self) -> Path:
        return (_PROMPTS_DIR / self.value).with_suffix(".md")

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8").strip()


class SystemPrompt(Prompt):
    PRO_WRITER = "pro_writer"
    GHOSTWRITER = "ghostwriter"
    NOVEL_AUTO = "novel_auto"
    BASE = "base"


class SectionPrompt(Prompt):
    SANDBOX_SEATBELT = "sandbox_seatbelt"
    SANDBOX_CONTAINER = "sandbox_container"
    SANDBOX_NONE = "sandbox_none"
    GIT_REPOSITORY = "git_repository"


class UtilityPrompt(Prompt):
    COMPACT = "compact"


ALL_PROMPTS: tuple[Prompt, ...] = (*SystemPrompt, *SectionPrompt, *UtilityPrompt)

__all__ = ["ALL_PROMPTS", "Prompt", "SectionPrompt", "SystemPrompt", "UtilityPrompt"]
