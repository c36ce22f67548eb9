"""
Error variants returned to callers of the user creation function.

Raw exceptions from Firebase Auth or Firestore are translated once into one
of the variants below, and the variant is turned into the HttpsError the
callable transport serializes back to the client.
"""

from dataclasses import dataclass
from typing import Any, Union

from firebase_admin import exceptions as firebase_exceptions
from firebase_functions import https_fn
from google.api_core import exceptions as google_exceptions

MISSING_FIELDS_MESSAGE = "Missing required fields: email, password, name"


@dataclass(frozen=True)
class ValidationFailed:
    message: str = MISSING_FIELDS_MESSAGE


@dataclass(frozen=True)
class AlreadyExists:
    message: str
    code: Any


@dataclass(frozen=True)
class Internal:
    details: str
    message: str = "Unknown error creating user"


UserCreationError = Union[ValidationFailed, AlreadyExists, Internal]


def _provider_code(error: Exception):
    """Provider error code carried by Firebase/Google API errors, else None."""
    if isinstance(error, firebase_exceptions.FirebaseError):
        return error.code
    if isinstance(error, google_exceptions.GoogleAPICallError):
        return error.code
    return None


def translate_error(error: Exception) -> UserCreationError:
    """
    Map a raw provider exception to an error variant.

    Errors that carry a provider code (duplicate email and the like) become
    AlreadyExists; everything else becomes Internal.
    """
    code = _provider_code(error)
    if code is not None:
        message = str(error) or "Error creating user"
        return AlreadyExists(message=message, code=code)
    return Internal(details=str(error))


def to_https_error(error: UserCreationError) -> https_fn.HttpsError:
    if isinstance(error, ValidationFailed):
        return https_fn.HttpsError(
            code=https_fn.FunctionsErrorCode.FAILED_PRECONDITION,
            message=error.message,
        )
    if isinstance(error, AlreadyExists):
        return https_fn.HttpsError(
            code=https_fn.FunctionsErrorCode.ALREADY_EXISTS,
            message=error.message,
            details={'code': error.code},
        )
    return https_fn.HttpsError(
        code=https_fn.FunctionsErrorCode.INTERNAL,
        message=error.message,
        details={'details': error.details},
    )
