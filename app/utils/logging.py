# app/utils/logging.py
#
# Never log access tokens, anon keys or the service role key.
import logging
from typing import Optional

from app.config import settings


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger with a single stream handler attached.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Like inserted")
    """
    logger = logging.getLogger(name)

    level_name = (level or settings.LOG_LEVEL).upper()
    # getLevelName only maps registered names to ints. Anything else falls back to INFO.
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    logger.setLevel(level_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
