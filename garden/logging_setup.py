from __future__ import annotations

import logging
import os
import sys

APP_LOGGER = "garden"
LOG_ENV_VAR = "GARDEN_LOG"

_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _level_for(verbosity: int) -> int:
    env_level = os.environ.get(LOG_ENV_VAR, "").strip().upper()
    if env_level:
        level = logging.getLevelName(env_level)
        if isinstance(level, int):
            return level
    return _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(verbosity: int = 0) -> logging.Logger:
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(_level_for(verbosity))
    logger.propagate = False

    if logger.handlers:
        # Each invocation may run with a different stderr (e.g. CliRunner).
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.stream = sys.stderr
        return logger

    # Prompts go to stderr too, so keep log lines clearly delimited.
    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    logger.debug("Logging initialized. level=%s", logging.getLevelName(logger.level))
    return logger
