"""
Firestore layout for user profiles
"""

from .lib.app_config import get_config_value

USERS_COLLECTION = get_config_value('users-collection', 'users')
TOKEN_FIELD = get_config_value('token-field', 'fcmToken')


def users_collection(services):
    """Profile collection reference for the given service handles."""
    return services.db.collection(USERS_COLLECTION)
