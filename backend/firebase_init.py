"""
Firebase Admin initialization and the shared service handles.

The Firebase app and its clients are created once per process and handed to
the entry points explicitly.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import auth, firestore, initialize_app, messaging

logger = logging.getLogger(__name__)

_services = None
_services_lock = threading.Lock()


@dataclass(frozen=True)
class ServiceHandles:
    """Identity provider, document store and push gateway used by the handlers."""
    auth: Any
    db: Any
    messaging: Any


def initialize_firebase_admin():
    """Initialize the default Firebase app if it is not already initialized."""
    if not firebase_admin._apps:
        initialize_app()
        logger.info("Firebase Admin initialized")
    return firebase_admin.get_app()


def get_services() -> ServiceHandles:
    """
    Return the process-wide service handles, creating them on first use.
    """
    global _services

    if _services is None:
        with _services_lock:
            if _services is None:
                initialize_firebase_admin()
                _services = ServiceHandles(
                    auth=auth,
                    db=firestore.client(),
                    messaging=messaging,
                )
    return _services


def reset_services(services: Optional[ServiceHandles] = None):
    """Replace (or clear) the cached service handles."""
    global _services
    with _services_lock:
        _services = services
