from __future__ import annotations

from collections.abc import Sequence

from scribe.modes.constants import FLAG_TRUE, OPTION_PREFIX


def parse_options(tokens: Sequence[str]) -> dict[str, str]:
    """Turn ``--key value`` / ``--flag`` tokens into a mapping.

    A flag followed by another flag (or by nothing) gets the value
    ``"true"``. Stray positional tokens are ignored and the last occurrence
    of a key wins. Never raises.
    """
    options: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith(OPTION_PREFIX):
            i += 1
            continue

        key = token[len(OPTION_PREFIX) :]
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None
        if nxt is not None and not nxt.startswith(OPTION_PREFIX):
            options[key] = nxt
            i += 2
        else:
            options[key] = FLAG_TRUE
            i += 1
    return options
