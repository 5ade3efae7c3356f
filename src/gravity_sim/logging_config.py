# MIT License (see LICENSE)
"""Console logging setup for scripts that drive the simulation."""
from __future__ import annotations
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "GRAVITY_SIM_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, name: str = "gravity_sim") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    The library itself only creates module loggers; call this from an
    application or script to see their output.

    Args:
        level: Log level name (DEBUG, INFO, ...). Falls back to the
            GRAVITY_SIM_LOG_LEVEL environment variable, then INFO.
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    numeric = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)

    # Repeated calls reconfigure the level without stacking handlers
    for handler in logger.handlers:
        if getattr(handler, "_gravity_sim", False):
            handler.setLevel(numeric)
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._gravity_sim = True
    logger.addHandler(handler)
    return logger
