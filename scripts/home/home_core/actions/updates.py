"""Package index refresh action (fail-soft)."""

from __future__ import annotations

import logging
import subprocess

from home_core.actions import first_line
from home_core.models import Failed, RunStatus, Success

logger = logging.getLogger(__name__)


def check_for_updates(command: list[str]) -> RunStatus:
    """Run the update command to completion and map its outcome to a status.

    Blocks until the child exits. Only stderr is inspected on failure;
    launch errors (missing binary, permission denied) are reported as the
    stringified exception rather than raised.
    """
    logger.info("running update check: %s", " ".join(command))
    try:
        proc = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        message = first_line(str(exc))
        logger.warning("update check could not start: %s", message)
        return Failed(message)

    if proc.returncode == 0:
        logger.info("update check succeeded")
        return Success()

    message = first_line(proc.stderr)
    logger.warning("update check exited %s: %s", proc.returncode, message)
    return Failed(message)
