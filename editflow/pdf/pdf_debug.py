"""Debug tracing for layout internals."""

from __future__ import annotations

import logging

from .pdf_constants import DEBUG_LAYOUT

logger = logging.getLogger("editflow.layout")


def _debug(*, msg: str) -> None:
    """Log layout debug output when enabled.

    Args:
        msg: Message to log.
    Returns:
        None.
    """

    if DEBUG_LAYOUT:
        logger.debug(msg)
