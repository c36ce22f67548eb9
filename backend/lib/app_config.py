#!/usr/bin/env python3
"""
Configuration loader for app_config.json
Holds the Firestore layout and the daily reminder schedule/content.
"""

import json
import logging
from pathlib import Path

# Create logger for this module
logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
APP_CONFIG_PATH = PROJECT_ROOT / 'app_config.json'

DEFAULT_REMINDER = {
    'schedule': '0 9 * * *',
    'timezone': 'America/New_York',
    'title': 'Daily Reminder',
    'body': "Don't forget to check in today!",
}

_config_cache = None


def get_app_config(reload=False):
    """
    Load and return the application configuration from app_config.json

    Args:
        reload: If True, force reload from file (default: False, uses cache)

    Returns:
        dict: Configuration dictionary, empty dict if file doesn't exist or can't be loaded
    """
    global _config_cache

    if _config_cache is None or reload:
        try:
            if APP_CONFIG_PATH.exists():
                with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
                    _config_cache = json.load(f)
                    logger.debug(f"Loaded app config from {APP_CONFIG_PATH}")
            else:
                logger.warning(f"app_config.json not found at {APP_CONFIG_PATH}, using defaults")
                _config_cache = {}
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse app_config.json: {e}")
            _config_cache = {}
        except OSError as e:
            logger.warning(f"Could not load app_config.json: {e}")
            _config_cache = {}

    return _config_cache.copy() if _config_cache else {}


def get_config_value(key, default=None, section=None):
    """
    Get a configuration value from app_config.json

    Examples:
        get_config_value('users-collection', 'users')
        get_config_value('timezone', section='daily-reminder')
    """
    config = get_app_config()

    if section:
        section_config = config.get(section) or {}
        return section_config.get(key, default)

    return config.get(key, default)


def get_reminder_config():
    """Daily reminder settings with defaults filled in."""
    reminder = DEFAULT_REMINDER.copy()
    reminder.update(get_app_config().get('daily-reminder') or {})
    return reminder


def reload_config():
    """
    Force reload of configuration from file (clears cache)
    """
    global _config_cache
    _config_cache = None
    return get_app_config(reload=True)
