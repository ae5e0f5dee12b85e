"""Log messages about dialog and quest handling at three levels."""

from __future__ import annotations

import logging

logger = logging.getLogger("questdialog")


def log(message: str) -> None:
    """Report an informational message."""
    logger.info("%s", message)


def warning(message: str) -> None:
    """Report a warning."""
    logger.warning("%s", message)


def error(message: str) -> None:
    """Report an error."""
    logger.error("%s", message)