"""Logging setup for Task CLI."""

import logging
import sys
from typing import Union


PACKAGE_LOGGER = "task_cli"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Configure the task_cli logger with a single stderr handler.

    Safe to call more than once: the previous handler is replaced.
    The root logger is left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))

    for h in list(logger.handlers):
        if isinstance(h, _StderrHandler):
            logger.removeHandler(h)

    handler = _StderrHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
