"""Logging setup shared by the API and the migration scripts."""
import logging
import sys

from propman.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Console handler on the root logger at settings.log_level. Returns root logger."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FMT))
    root.addHandler(handler)
    # Uvicorn access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return root
