import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Create (or fetch) a named logger with a single stdout handler.

    Args:
        name: Logger name, usually the service or module name
        level: Optional level name (DEBUG, INFO, ...). Defaults to INFO.
    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or "INFO").upper()))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger
