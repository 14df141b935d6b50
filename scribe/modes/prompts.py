"""Scribe Mode Prompts
====================

Selection of the mode-specific system prompt template.
"""

from __future__ import annotations

from scribe.modes.constants import MODE_PROMPTS
from scribe.modes.types import WriterMode


def get_mode_specific_prompt(mode: str | None) -> str:
    """Return the template for ``mode``.

    Unknown or missing modes use the pro-writer template.

    Args:
        mode: A mode name, usually a :class:`WriterMode` value

    Returns:
        The mode's template text
    """
    return MODE_PROMPTS[WriterMode.coerce(mode)].read()
