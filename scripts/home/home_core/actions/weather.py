"""Weather action placeholder."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

NOTICE = "Retrieve Weather info..."


def run() -> str:
    # No weather source is wired up yet; the menu status stays untouched.
    logger.info(NOTICE)
    return NOTICE
