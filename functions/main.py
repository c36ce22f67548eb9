"""
Cloud Functions entry point
Exports the create_user callable and the daily_notification scheduled job.
"""

import sys
from pathlib import Path

# Deployed from the project root; make the backend package importable
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from firebase_functions import https_fn, scheduler_fn

from backend.firebase_init import get_services
from backend.lib.app_config import get_reminder_config
from backend.lib.logging_config import setup_logging
from backend.notification_scheduler import check_and_send_daily_reminder
from backend.services.user_service import create_user as provision_user

load_dotenv(PROJECT_ROOT / '.env')
setup_logging()

REMINDER = get_reminder_config()


@https_fn.on_call()
def create_user(req: https_fn.CallableRequest):
    """Create a Firebase Auth user and its Firestore profile."""
    return provision_user(get_services(), req.data)


@scheduler_fn.on_schedule(
    schedule=REMINDER['schedule'],
    timezone=REMINDER['timezone'],
)
def daily_notification(event: scheduler_fn.ScheduledEvent) -> None:
    """Push the daily reminder to every registered device."""
    check_and_send_daily_reminder(get_services())
