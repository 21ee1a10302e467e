"""Logging setup for front-ends embedding Sprig.

Library modules only create loggers with `logging.getLogger(__name__)`;
nothing is configured on import. Call `configure_logging` once from the
embedding program to see diagnostic output.
"""

from __future__ import annotations

import logging
import sys

from sprig.config import get_log_level

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | None = None, stream=None) -> logging.Logger:
    """Attach a single stream handler to the `sprig` logger and set its level."""
    logger = logging.getLogger("sprig")
    logger.setLevel(get_log_level() if level is None else level)
    for handler in list(logger.handlers):
        if getattr(handler, "_sprig_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._sprig_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
