#!/usr/bin/env python3
"""
Scheduled notification runs.
Called by the Cloud Scheduler trigger in functions/main.py.
"""

import logging

from .services.notification_service import send_daily_reminder

# Create logger for this module
logger = logging.getLogger(__name__)


def check_and_send_daily_reminder(services):
    """
    Send the daily reminder push and clean up failed tokens.

    Never raises: a failed run is logged and the next scheduled run tries again.
    """
    logger.info("[DailyReminder] Starting daily reminder run")
    try:
        summary = send_daily_reminder(services)
        logger.info(
            f"[DailyReminder] Run completed: sent={summary['sent']}, "
            f"{summary['success_count']} succeeded, {summary['failure_count']} failed, "
            f"{summary['removed']} staged token removal(s) committed"
        )
        return summary
    except Exception as e:
        logger.error(f"[DailyReminder] Error in scheduled task: {e}", exc_info=True)
        return None
