#!/usr/bin/env python3
"""
Run the scheduled logic locally against the configured Firebase project

Usage:
    python scripts/run_scheduled_functions.py [--function FUNCTION_NAME] [--token TOKEN ...]

Examples:
    python scripts/run_scheduled_functions.py --function daily-reminder
    python scripts/run_scheduled_functions.py --function cleanup-tokens --token abc --token def
"""

import argparse
import os
import sys
import traceback
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / '.env')

if not os.environ.get('PROJECT_ID'):
    project_id = os.environ.get('GCP_PROJECT') or os.environ.get('GCLOUD_PROJECT')
    if project_id:
        os.environ['PROJECT_ID'] = project_id

from backend.firebase_init import get_services
from backend.lib.logging_config import setup_logging
from backend.notification_scheduler import check_and_send_daily_reminder
from backend.services.token_service import remove_invalid_tokens


def run_daily_reminder():
    """Run the daily reminder exactly as the scheduler would"""
    print("=" * 80)
    print("Running daily_notification")
    print("=" * 80)

    summary = check_and_send_daily_reminder(get_services())
    if summary is None:
        print("\n✗ Daily reminder run failed (see log output above)")
        return False

    print(f"Sent: {summary['sent']}")
    print(f"Succeeded: {summary['success_count']}")
    print(f"Failed: {summary['failure_count']}")
    print(f"Staged token removals committed: {summary['removed']}")
    print("\n✓ Daily reminder run completed")
    return True


def run_cleanup_tokens(tokens):
    """Remove the given tokens from every profile"""
    print("=" * 80)
    print(f"Removing {len(tokens)} token(s)")
    print("=" * 80)

    try:
        removed = remove_invalid_tokens(get_services(), tokens)
    except Exception as e:
        print(f"\n✗ Token cleanup failed: {e}")
        traceback.print_exc()
        return False

    print(f"\n✓ Committed {removed} staged token removal(s)")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Run scheduled functions locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_scheduled_functions.py --function daily-reminder
  python scripts/run_scheduled_functions.py --function cleanup-tokens --token abc
        """
    )
    parser.add_argument(
        "--function",
        choices=["daily-reminder", "cleanup-tokens"],
        default="daily-reminder",
        help="Which function to run (default: daily-reminder)"
    )
    parser.add_argument(
        "--token",
        action="append",
        default=[],
        help="Token to remove (cleanup-tokens only, repeatable)"
    )

    args = parser.parse_args()
    setup_logging()

    print(f"Project ID: {os.environ.get('PROJECT_ID', 'not set')}")

    if args.function == "cleanup-tokens":
        if not args.token:
            parser.error("--function cleanup-tokens requires at least one --token")
        ok = run_cleanup_tokens(args.token)
    else:
        ok = run_daily_reminder()

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
