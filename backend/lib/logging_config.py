#!/usr/bin/env python3
"""
Logging setup shared by the Cloud Functions entry points and local scripts.
"""

import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def get_log_level_from_env() -> int:
    """
    Get log level from LOG_LEVEL environment variable.

    Returns:
        int: Logging level constant (defaults to logging.INFO)
    """
    log_level_str = os.environ.get('LOG_LEVEL', 'INFO').upper()
    log_level = LEVEL_MAP.get(log_level_str, logging.INFO)

    if log_level_str not in LEVEL_MAP:
        logging.getLogger(__name__).warning(
            f"Invalid LOG_LEVEL value '{os.environ.get('LOG_LEVEL')}'. "
            f"Valid values are: {', '.join(LEVEL_MAP)}. Defaulting to INFO."
        )

    return log_level


def setup_logging(force: bool = False) -> None:
    """
    Configure the root logger with a single stderr handler.

    Cloud Functions picks up stderr lines, so the same setup works when
    deployed and when running locally.

    Args:
        force: If True, reconfigure logging even if handlers already exist.
               Defaults to False (idempotent behavior).
    """
    root_logger = logging.getLogger()
    log_level = get_log_level_from_env()

    if not force and root_logger.handlers:
        root_logger.setLevel(log_level)
        return

    if force:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    if log_level <= logging.INFO:
        logging.info(f"Logging configured with level: {logging.getLevelName(log_level)}")
