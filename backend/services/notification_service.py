#!/usr/bin/env python3
"""
Notification service for the daily reminder push sent to every registered device
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from firebase_admin import messaging

from ..db import TOKEN_FIELD, users_collection
from ..lib.app_config import get_reminder_config
from .token_service import remove_invalid_tokens

# Create logger for this module
logger = logging.getLogger(__name__)

DAILY_REMINDER_TYPE = 'daily_reminder'


def collect_tokens(user_docs: Iterable) -> List[str]:
    """
    Flatten the FCM tokens of all profile documents into one list.

    Document order and the order of tokens inside each document are kept.
    Duplicates are not removed. Documents without a token list, or whose
    token field is not a list of strings, contribute nothing.
    """
    tokens = []
    for user_doc in user_docs:
        user_data = user_doc.to_dict() or {}
        user_tokens = user_data.get(TOKEN_FIELD)
        if user_tokens is None:
            continue
        if not isinstance(user_tokens, list) or not all(isinstance(t, str) for t in user_tokens):
            logger.warning(f"[DailyReminder] Ignoring malformed {TOKEN_FIELD} on user {user_doc.id}")
            continue
        tokens.extend(t for t in user_tokens if t)
    return tokens


def build_daily_reminder(tokens: List[str], now: Optional[datetime] = None) -> messaging.MulticastMessage:
    """Build the multicast message for the daily reminder."""
    reminder = get_reminder_config()
    sent_at = now or datetime.now(timezone.utc)
    return messaging.MulticastMessage(
        notification=messaging.Notification(
            title=reminder['title'],
            body=reminder['body'],
        ),
        data={
            'type': DAILY_REMINDER_TYPE,
            'timestamp': sent_at.isoformat(),
        },
        tokens=tokens,
    )


def failed_tokens(tokens: List[str], responses) -> List[str]:
    """
    Tokens whose send failed.

    FCM returns one response per token in the order the tokens were sent.
    """
    failed = []
    for idx, response in enumerate(responses):
        if not response.success:
            token = tokens[idx]
            logger.warning(f"[DailyReminder] Failed to send to token {token}: {response.exception}")
            failed.append(token)
    return failed


def send_daily_reminder(services) -> Dict[str, Any]:
    """
    Send the daily reminder to every token stored on a user profile and
    remove the tokens that FCM rejected.

    Reads the whole users collection in one pass (no pagination).

    Returns:
        Summary dict with sent, success_count, failure_count, failed_tokens
        and removed
    """
    summary = {
        'sent': False,
        'success_count': 0,
        'failure_count': 0,
        'failed_tokens': [],
        'removed': 0,
    }

    user_docs = list(users_collection(services).stream())
    logger.info(f"[DailyReminder] Found {len(user_docs)} user(s)")

    tokens = collect_tokens(user_docs)
    if not tokens:
        logger.info("[DailyReminder] No FCM tokens found, skipping send")
        return summary

    logger.info(f"[DailyReminder] Sending daily reminder to {len(tokens)} token(s)")
    response = services.messaging.send_each_for_multicast(build_daily_reminder(tokens))

    summary['sent'] = True
    summary['success_count'] = response.success_count
    summary['failure_count'] = response.failure_count
    logger.info(f"[DailyReminder] Sent: {response.success_count} succeeded, {response.failure_count} failed")

    if response.failure_count > 0:
        summary['failed_tokens'] = failed_tokens(tokens, response.responses)
        summary['removed'] = remove_invalid_tokens(services, summary['failed_tokens'])

    return summary
