"""Check that the installed package is complete before launching.

Run as ``python -m scribe.cli.build_status``. Exits 1 when a packaged
prompt template is missing or empty, which usually means a broken or
partial install.
"""

from __future__ import annotations

import sys

from rich import print as rprint

from scribe.core.prompts import ALL_PROMPTS, Prompt


def find_missing_prompts(prompts: tuple[Prompt, ...] = ALL_PROMPTS) -> list[Prompt]:
    missing = []
    for prompt in prompts:
        path = prompt.path
        if not path.is_file() or path.stat().st_size == 0:
            missing.append(prompt)
    return missing


def main() -> int:
    missing = find_missing_prompts()
    if not missing:
        return 0

    rprint("[red]Error: the Scribe installation is incomplete.[/]")
    for prompt in missing:
        rprint(f"[yellow]  missing or empty prompt template: {prompt.path}[/]")
    rprint("[yellow]Reinstall the package, e.g. `pip install -e .`[/]")
    return 1


if __name__ == "__main__":
    sys.exit(main())
