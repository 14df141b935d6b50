"""Scribe - writer modes and prompts for an interactive agent CLI."""

from __future__ import annotations

from pathlib import Path

__version__ = "0.1.0"
SCRIBE_ROOT = Path(__file__).parent

__all__ = ["SCRIBE_ROOT", "__version__"]
