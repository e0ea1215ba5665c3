"""Helpers for converting Firestore document fields."""

from datetime import datetime

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

STORE_ERRORS = (GoogleAPIError, GoogleAuthError)


def optional_str(value: object) -> str | None:
    """Return a stored field as text, keeping missing values as None."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


def parse_timestamp(value: object) -> datetime | None:
    """Return a stored timestamp as a datetime, if it can be read."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None
