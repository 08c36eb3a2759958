"""Repository check placeholder."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

NOTICE = "Checking"


def run() -> str:
    logger.info("repository check requested: %s", NOTICE)
    return NOTICE
