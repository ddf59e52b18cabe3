"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys

_NOISY_LOGGERS = ("sqlalchemy", "asyncpg", "httpx")


def setup_logging(level: str = "INFO") -> None:
    """Send application logs to stdout once, at ``level``."""

    root_logger = logging.getLogger()
    if any(getattr(h, "_academy_reports", False) for h in root_logger.handlers):
        root_logger.setLevel(level.upper())
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler._academy_reports = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging"]
