from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from scribe.core.config import load_environment
from scribe.core.paths import LOG_FILENAME, get_log_dir

logger = logging.getLogger("scribe")

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_MAX_LOG_BYTES = 1_000_000
_LOG_BACKUPS = 3


def setup_logging() -> None:
    """Attach the rotating file handler to the ``scribe`` logger.

    The console is left to rich-rendered output, so nothing is logged to
    stderr. Safe to call more than once.
    """
    env = load_environment()
    if env.log_level:
        level = logging.getLevelName(env.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    elif env.debug_enabled:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger.setLevel(level)
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return

    log_dir = get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
    except OSError:
        logger.addHandler(logging.NullHandler())
        return

    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
