"""Firestore repository for clean-up events."""

import logging
from dataclasses import dataclass

from google.cloud import firestore

from cleanup_tracker.adapters.firestore_documents import (
    STORE_ERRORS,
    optional_str,
    parse_timestamp,
)
from cleanup_tracker.domain.events import Event, NewEvent
from cleanup_tracker.errors import StorageError
from cleanup_tracker.services.events import EventRepository

logger = logging.getLogger(__name__)


@dataclass
class FirestoreEventRepository(EventRepository):
    """Firestore implementation for event persistence."""

    client: firestore.Client
    collection: str = "events"

    def add_event(self, event: NewEvent) -> str:
        """Append an event document and return its id."""
        try:
            _, reference = self.client.collection(self.collection).add(
                {
                    "title": event.title,
                    "description": event.description,
                    "location": event.location,
                    "date": event.date,
                    "creatorId": event.creator_id,
                    "creatorEmail": event.creator_email,
                    "createdAt": event.created_at,
                }
            )
        except STORE_ERRORS as exc:
            logger.exception("Failed to add event")
            raise StorageError(str(exc)) from exc
        return reference.id

    def list_events(self) -> list[Event]:
        """Return every event document."""
        try:
            snapshots = list(self.client.collection(self.collection).stream())
        except STORE_ERRORS as exc:
            logger.exception("Failed to list events")
            raise StorageError(str(exc)) from exc
        return [
            _parse_event(snapshot.id, snapshot.to_dict() or {})
            for snapshot in snapshots
        ]


def _parse_event(event_id: str, data: dict[str, object]) -> Event:
    return Event(
        id=event_id,
        title=optional_str(data.get("title")),
        description=optional_str(data.get("description")),
        location=optional_str(data.get("location")),
        date=optional_str(data.get("date")),
        creator_id=optional_str(data.get("creatorId")),
        creator_email=optional_str(data.get("creatorEmail")),
        created_at=parse_timestamp(data.get("createdAt")),
    )
