"""Clean-up event write and read logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from cleanup_tracker.domain.events import Event, NewEvent
from cleanup_tracker.domain.models import Submitter
from cleanup_tracker.services.identity import require_submitter

logger = logging.getLogger(__name__)


class EventRepository(Protocol):
    """Persistence interface for clean-up events."""

    def add_event(self, event: NewEvent) -> str:
        """Append an event and return its store-assigned id."""

    def list_events(self) -> list[Event]:
        """Return every stored event."""


@dataclass
class EventService:
    """Application service for scheduling clean-up events."""

    repository: EventRepository

    def create_event(  # noqa: PLR0913
        self,
        title: object,
        description: object,
        location: object,
        date: object,
        creator: Submitter | None,
    ) -> str:
        """Append an event created by the given user and return its id."""
        resolved = require_submitter(creator)
        event_id = self.repository.add_event(
            NewEvent(
                title=title,
                description=description,
                location=location,
                date=date,
                creator_id=resolved.uid,
                creator_email=resolved.email or None,
                created_at=datetime.now(tz=UTC),
            )
        )
        logger.info(
            "Event created", extra={"event_id": event_id, "creator_id": resolved.uid}
        )
        return event_id

    def list_events(self) -> list[Event]:
        """Return all events in store order."""
        return self.repository.list_events()
