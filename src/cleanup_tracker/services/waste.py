"""Waste entry write and read logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from cleanup_tracker.domain.models import Submitter
from cleanup_tracker.domain.waste import NewWasteEntry, WasteEntry
from cleanup_tracker.services.identity import require_submitter

logger = logging.getLogger(__name__)


class WasteEntryRepository(Protocol):
    """Persistence interface for waste entries."""

    def add_entry(self, entry: NewWasteEntry) -> str:
        """Append an entry and return its store-assigned id."""

    def list_entries(self) -> list[WasteEntry]:
        """Return every stored entry."""


@dataclass
class WasteService:
    """Application service for logging collected waste."""

    repository: WasteEntryRepository

    def create_entry(
        self,
        type: object,  # noqa: A002
        volume: object,
        location: object,
        submitter: Submitter | None,
    ) -> str:
        """Append a waste entry attributed to the submitter and return its id."""
        resolved = require_submitter(submitter)
        entry_id = self.repository.add_entry(
            NewWasteEntry(
                type=type,
                volume=volume,
                location=location,
                submitter_id=resolved.uid,
                submitter_email=resolved.email or None,
                created_at=datetime.now(tz=UTC),
            )
        )
        logger.info(
            "Waste entry created",
            extra={"entry_id": entry_id, "submitter_id": resolved.uid},
        )
        return entry_id

    def list_entries(self) -> list[WasteEntry]:
        """Return all waste entries in store order."""
        return self.repository.list_entries()
