"""Maps an activated menu position to its effect and records the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from home_core.actions import repo, weather
from home_core.actions.updates import check_for_updates
from home_core.models import MenuModel, RunStatus

logger = logging.getLogger(__name__)

Outcome = tuple[Optional[RunStatus], Optional[str]]


@dataclass
class Activation:
    index: int
    label: str
    status: Optional[RunStatus] = None
    notice: Optional[str] = None
    quit: bool = False


def _updates(settings: dict) -> Outcome:
    return check_for_updates(list(settings["update_command"])), None


def _weather(_settings: dict) -> Outcome:
    return None, weather.run()


def _repo(_settings: dict) -> Outcome:
    return None, repo.run()


ACTIONS: dict[int, Callable[[dict], Outcome]] = {
    0: _updates,
    1: _weather,
    2: _repo,
}


def activate(model: MenuModel, settings: dict) -> Activation:
    """Run the action under the cursor, recording its status on the model.

    The last menu position always quits. Positions without an entry in
    ``ACTIONS`` do nothing.
    """
    index = model.current_index()
    label = model.label_of(index)

    if index == model.last_index:
        logger.info("quit selected")
        return Activation(index=index, label=label, quit=True)

    handler = ACTIONS.get(index)
    if handler is None:
        logger.debug("no action bound to %s (%s)", index, label)
        return Activation(index=index, label=label)

    status, notice = handler(settings)
    if status is not None:
        model.set_status(index, status)
    return Activation(index=index, label=label, status=status, notice=notice)
