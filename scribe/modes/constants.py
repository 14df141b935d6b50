"""Scribe Mode Constants
======================

Static tables for the writer mode system: the configuration bundle for
each mode, the ``/mode show`` summaries, per-mode tool identifiers and the
``/mode list`` text.
"""

from __future__ import annotations

from dataclasses import dataclass

from scribe.core.prompts import SystemPrompt
from scribe.modes.types import ModeInfo, WriterMode

# Mode names in display order
VALID_MODES: tuple[WriterMode, ...] = (
    WriterMode.PRO_WRITER,
    WriterMode.GHOSTWRITER,
    WriterMode.NOVEL_AUTO,
)

# Marker that introduces an option token
OPTION_PREFIX = "--"

# Value given to an option with no value token
FLAG_TRUE = "true"


# =============================================================================
# CONFIGURATION BUNDLES
# =============================================================================


@dataclass(frozen=True)
class SettingSpec:
    """One ``label: value`` line of a mode's active settings.

    ``option`` names the caller-supplied option that overrides ``default``;
    settings without one are fixed.
    """

    label: str
    default: str
    option: str | None = None


@dataclass(frozen=True)
class ModeBundle:
    description: str
    settings: tuple[SettingSpec, ...]
    commands: tuple[str, ...]


MODE_BUNDLES: dict[WriterMode, ModeBundle] = {
    WriterMode.PRO_WRITER: ModeBundle(
        description=(
            "Professional writing mode activated. You now have access to "
            "literary expertise, research tools, and publishing workflows."
        ),
        settings=(
            SettingSpec("Style Guide", "chicago", option="style"),
            SettingSpec("Genre", "general", option="genre"),
            SettingSpec("Citation Format", "chicago", option="cite"),
            SettingSpec("Fact Check", "enabled"),
        ),
        commands=(
            "/research [topic] - Research and fact-check",
            "/outline [structure] - Create plot outlines",
            "/cite [source] - Manage citations",
            "/export [format] - Export to various formats",
        ),
    ),
    WriterMode.GHOSTWRITER: ModeBundle(
        description=(
            "Ghostwriting mode activated. You can now analyze voices, conduct "
            "interviews, and collaborate on content creation."
        ),
        settings=(
            SettingSpec("Voice Profile", "default", option="profile"),
            SettingSpec("Interview Depth", "comprehensive", option="depth"),
            SettingSpec("Safety Filters", "enabled"),
            SettingSpec("Collaboration", "enabled"),
        ),
        commands=(
            "/voice learn [samples] - Learn client voice",
            "/interview [topics] - Start content interview",
            "/draft [style] - Create collaborative drafts",
            "/safety check - Verify content safety",
        ),
    ),
    WriterMode.NOVEL_AUTO: ModeBundle(
        description=(
            "Automated novel generation mode activated. You can now build "
            "worlds, manage continuity, and generate story content."
        ),
        settings=(
            SettingSpec("World Format", "json", option="world"),
            SettingSpec("Continuity Check", "strict"),
            SettingSpec("Character Tracking", "enabled"),
            SettingSpec("Plot Generation", "enabled"),
        ),
        commands=(
            "/world import [source] - Import world settings",
            "/world validate - Check continuity",
            "/character new [type] - Create characters",
            "/story generate [type] - Generate story content",
        ),
    ),
}


# =============================================================================
# MODE METADATA
# =============================================================================

MODE_INFOS: dict[WriterMode, ModeInfo] = {
    WriterMode.PRO_WRITER: ModeInfo(
        description=(
            "Professional writing mode with literary expertise, research "
            "tools, and publishing workflows."
        ),
        tools=("Research tools", "Citation management", "Style guides", "Export tools"),
    ),
    WriterMode.GHOSTWRITER: ModeInfo(
        description=(
            "Collaborative writing mode for voice analysis, interviews, and "
            "co-creation."
        ),
        tools=("Voice analysis", "Interview tools", "Safety filters", "Collaboration tools"),
    ),
    WriterMode.NOVEL_AUTO: ModeInfo(
        description=(
            "Automated novel generation with world-building and continuity "
            "management."
        ),
        tools=("World parser", "Continuity engine", "Character bible", "Plot generator"),
    ),
}

# Tool identifiers the agent enables per mode
MODE_TOOLS: dict[WriterMode, tuple[str, ...]] = {
    WriterMode.PRO_WRITER: (
        "research",
        "citation",
        "factcheck",
        "styleguard",
        "plotanalyzer",
    ),
    WriterMode.GHOSTWRITER: (
        "voiceanalyzer",
        "interviewbot",
        "safetyfilter",
        "collaborationtracker",
    ),
    WriterMode.NOVEL_AUTO: (
        "worldparser",
        "continuityengine",
        "characterbible",
        "plotgenerator",
        "timelinekeeper",
    ),
}

MODE_PROMPTS: dict[WriterMode, SystemPrompt] = {
    WriterMode.PRO_WRITER: SystemPrompt.PRO_WRITER,
    WriterMode.GHOSTWRITER: SystemPrompt.GHOSTWRITER,
    WriterMode.NOVEL_AUTO: SystemPrompt.NOVEL_AUTO,
}

MODES_LISTING = """
📚 **Available Writing Modes:**

1. **pro-writer** - Professional Writer Assistant
   - Literary expertise and research tools
   - Citation management and style guides
   - Professional publishing workflows

2. **ghostwriter** - Collaborative Writing
   - Voice analysis and mimicry
   - Interview-based content extraction
   - Safety filters and collaboration tools

3. **novel-auto** - Automated Novel Generation
   - World-building and continuity management
   - Character development and plot generation
   - Knowledge graph-based story consistency

**Usage:**
`/mode [mode-name] [options]`

**Examples:**
`/mode pro-writer --style chicago --genre mystery`
`/mode ghostwriter --profile client-voice.json`
`/mode novel-auto --world eldoria.json`
"""
