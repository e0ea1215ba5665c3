"""Pydantic models for API request bodies."""

from typing import Any

from pydantic import BaseModel

from cleanup_tracker.domain.models import Submitter


class _AttributedPayload(BaseModel):
    user: Any = None

    def submitter(self) -> Submitter | None:
        """Return the submitter identity, if a uid was supplied."""
        if not isinstance(self.user, dict):
            return None
        uid = self.user.get("uid")
        if not uid:
            return None
        email = self.user.get("email")
        return Submitter(uid=str(uid), email=str(email) if email else None)


class WasteEntryCreate(_AttributedPayload):
    """Body for logging a waste entry; field values are stored as given."""

    type: Any = None
    volume: Any = None
    location: Any = None


class EventCreate(_AttributedPayload):
    """Body for scheduling a clean-up event; field values are stored as given."""

    title: Any = None
    description: Any = None
    location: Any = None
    date: Any = None
