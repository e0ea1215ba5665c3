"""Domain models for clean-up events."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewEvent:
    """Event data ready to be appended to the store."""

    title: object
    description: object
    location: object
    date: object
    creator_id: str
    creator_email: str | None
    created_at: datetime


@dataclass(frozen=True)
class Event:
    """A scheduled clean-up gathering."""

    id: str
    title: str | None
    description: str | None
    location: str | None
    date: str | None
    creator_id: str | None
    creator_email: str | None
    created_at: datetime | None
