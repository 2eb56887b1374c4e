"""Logging setup."""
import logging


def setup_logging(level="INFO", fmt=None):
    """
    Configure the root logger once for the process.

    Args:
        level: Level name (e.g. 'INFO') or number
        fmt: logging format string
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
