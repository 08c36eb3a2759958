"""Settings resolution and user config merging for CLI Home."""

from __future__ import annotations

import json
import logging
from pathlib import Path

DEFAULT_SETTINGS: dict = {
    "update_command": ["sudo", "apt", "update"],
    "poll_interval": 0.1,
    "log_file": None,
    "log_level": "WARNING",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsError(ValueError):
    pass


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise SettingsError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise SettingsError(f"invalid JSON config: {exc}") from exc

    if not isinstance(data, dict):
        raise SettingsError("config must be a JSON object")
    return data


def _update_command(value) -> list[str]:
    if not isinstance(value, list) or not value or not all(isinstance(part, str) and part for part in value):
        raise SettingsError("update_command must be a non-empty list of strings")
    return list(value)


def resolve_settings(config_path: str | None = None) -> dict:
    resolved = dict(DEFAULT_SETTINGS)
    resolved["update_command"] = list(DEFAULT_SETTINGS["update_command"])
    user_config = load_user_config(config_path)

    if "update_command" in user_config:
        resolved["update_command"] = _update_command(user_config["update_command"])

    if "poll_interval" in user_config:
        try:
            value = float(user_config["poll_interval"])
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"invalid poll_interval: {user_config['poll_interval']!r}") from exc
        resolved["poll_interval"] = max(0.01, value)

    if user_config.get("log_file"):
        resolved["log_file"] = str(user_config["log_file"])

    if "log_level" in user_config:
        level = str(user_config["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise SettingsError(f"unknown log_level: {user_config['log_level']}")
        resolved["log_level"] = level

    logging.getLogger(__name__).debug("resolved settings from %s", config_path or "defaults")
    return resolved
