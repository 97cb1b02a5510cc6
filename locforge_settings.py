"""
LocForge Settings Module
Handles loading and saving of user settings (API key, engine, defaults).
"""

import json
import locforge_config as config
from locforge_logger import get_logger
logger = get_logger("settings")


def default_settings():
    """Return a fresh copy of the default settings."""
    return {
        "api_key": None,
        "engine": config.DEFAULT_ENGINE_ID,
        "model": config.DEFAULT_MODEL_NAME,
        "target_language": None,
        "target_countries": [],
    }


def load_settings(settings_file=None):
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = settings_file or config.SETTINGS_FILE_PATH
    defaults = default_settings()

    if not settings_file.is_file():
        logger.debug(f"Settings file not found ({settings_file}). Using defaults.")
        return defaults

    try:
        logger.debug(f"Loading settings: {settings_file}")
        with settings_file.open('r', encoding='utf-8') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"Settings file ({settings_file}) is corrupt (invalid JSON). Using defaults.")
        return defaults
    except OSError as e:
        logger.error(f"Error while loading settings ({settings_file}): {e}. Using defaults.")
        return defaults

    if not isinstance(loaded_data, dict):
        logger.warning("Settings file format is invalid (not an object). Using defaults.")
        return defaults

    settings = defaults.copy()
    settings.update(loaded_data)

    for key in ("engine", "model"):
        if not isinstance(settings.get(key), str) or not settings[key].strip():
            logger.warning(f"Invalid '{key}' value ({settings.get(key)!r}). Using default.")
            settings[key] = defaults[key]

    if settings.get("target_language") is not None and not isinstance(settings["target_language"], str):
        logger.warning("Invalid 'target_language' value. Ignoring it.")
        settings["target_language"] = None

    countries = settings.get("target_countries")
    if not isinstance(countries, list) or not all(isinstance(c, str) for c in countries):
        logger.warning("Invalid 'target_countries' value. Using an empty list.")
        settings["target_countries"] = []

    logger.debug("Settings loaded successfully.")
    return settings


def save_settings(settings_data, settings_file=None):
    """Save settings to JSON file."""

    settings_file = settings_file or config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.info("Settings saved.")
        return True
    except OSError as e:
        logger.critical(f"Could not save settings ({settings_file}): {e}")
        return False
