#!/usr/bin/env python3
"""
Removal of FCM tokens that the push gateway rejected
"""

import logging
from typing import List

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..db import TOKEN_FIELD, users_collection

# Create logger for this module
logger = logging.getLogger(__name__)


def remove_invalid_tokens(services, tokens: List[str]) -> int:
    """
    Remove each token from every profile that references it.

    All removals are staged in a single write batch and committed together,
    so either every profile is updated or none is. Errors are logged and not
    raised; tokens left behind are picked up again on the next run.

    Args:
        services: ServiceHandles with db
        tokens: Tokens reported as failed by the push gateway

    Returns:
        Number of removals committed (0 on error or when nothing matched)
    """
    try:
        collection = users_collection(services)
        batch = services.db.batch()
        operation_count = 0

        for token in tokens:
            query = collection.where(filter=FieldFilter(TOKEN_FIELD, 'array_contains', token)).stream()
            for doc in query:
                batch.update(doc.reference, {TOKEN_FIELD: firestore.ArrayRemove([token])})
                operation_count += 1

        if operation_count > 0:
            batch.commit()
            logger.info(f"[TokenCleanup] Committed {operation_count} staged token removal(s)")
        else:
            logger.info("[TokenCleanup] No profiles referenced the failed tokens, nothing to commit")

        return operation_count
    except Exception as e:
        logger.error(f"[TokenCleanup] Error removing invalid tokens: {e}", exc_info=True)
        return 0
