"""
Project-wide logger.
"""
import logging
import sys

from config import LOG_LEVEL

_logger = logging.getLogger("interview_insights")
if not _logger.handlers:
    _logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def get_logger(name: str = None) -> logging.Logger:
    if name:
        return _logger.getChild(name)
    return _logger
