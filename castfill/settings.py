"""
Settings Module for castfill

Reads user defaults for the command line from config.json in the working
directory. Unknown keys are kept, values of known keys with the wrong
type are replaced by their defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "backtrack",
    "timeout_sec": None,
    "log_level": "INFO",
    "debug_image_dir": "debug",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings, falling back to defaults.

    Args:
        path: Settings file to read (default: config.json)

    Returns:
        Settings dictionary with every default key present
    """
    path = path or SETTINGS_FILE

    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(loaded, dict):
        logger.warning(f"Settings in {path} must be a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = DEFAULT_SETTINGS.copy()
    result.update(loaded)
    _validate(result)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings as JSON.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (default: config.json)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def _validate(settings: Dict[str, Any]) -> None:
    """Reset known keys holding unusable values to their defaults."""
    timeout = settings["timeout_sec"]
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
    ):
        _reset(settings, "timeout_sec")

    level = settings["log_level"]
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        _reset(settings, "log_level")

    for key in ("strategy_name", "debug_image_dir"):
        if not isinstance(settings[key], str) or not settings[key]:
            _reset(settings, key)


def _reset(settings: Dict[str, Any], key: str) -> None:
    logger.warning(f"Invalid setting {key}={settings[key]!r}, using {DEFAULT_SETTINGS[key]!r}")
    settings[key] = DEFAULT_SETTINGS[key]
