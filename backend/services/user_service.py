#!/usr/bin/env python3
"""
User service for provisioning accounts: a Firebase Auth identity plus the
matching profile document in Firestore.
"""

import logging
from typing import Any, Dict

from ..db import users_collection
from ..errors import ValidationFailed, to_https_error, translate_error

# Create logger for this module
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('email', 'password', 'name')


def validate_create_user_request(data) -> Dict[str, str]:
    """
    Check that the request carries non-empty string email, password and name.

    Raises:
        HttpsError: failed-precondition when a field is missing or empty
    """
    if not isinstance(data, dict) or not all(
        isinstance(data.get(key), str) and data[key] for key in REQUIRED_FIELDS
    ):
        error = ValidationFailed()
        logger.error(f"[CreateUser] {error.message}")
        raise to_https_error(error)
    return {key: data[key] for key in REQUIRED_FIELDS}


def create_user(services, data) -> Dict[str, Any]:
    """
    Create a Firebase Auth user and its profile document.

    The profile is written after the identity exists; if the write fails the
    identity is left in place.

    Args:
        services: ServiceHandles with auth and db
        data: Callable payload with email, password and name

    Returns:
        {'success': True, 'user': {'uid', 'email', 'name'}}

    Raises:
        HttpsError: failed-precondition, already-exists or internal
    """
    fields = validate_create_user_request(data)

    try:
        user_record = services.auth.create_user(
            email=fields['email'],
            password=fields['password'],
        )

        user_data = {
            'uid': user_record.uid,
            'email': fields['email'],
            'name': fields['name'],
        }
        users_collection(services).document(user_record.uid).set(user_data)

        logger.info(f"[CreateUser] User created successfully: {user_data}")
        return {'success': True, 'user': user_data}
    except Exception as e:
        logger.error(f"[CreateUser] Error creating user: {e}", exc_info=True)
        raise to_https_error(translate_error(e)) from e
