"""Domain models for waste entries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewWasteEntry:
    """Waste entry data ready to be appended to the store."""

    type: object
    volume: object
    location: object
    submitter_id: str
    submitter_email: str | None
    created_at: datetime


@dataclass(frozen=True)
class WasteEntry:
    """A reported quantity of collected waste."""

    id: str
    type: str | None
    volume: str | None
    location: str | None
    submitter_id: str | None
    submitter_email: str | None
    created_at: datetime | None
