"""Firestore repository for waste entries."""

import logging
from dataclasses import dataclass

from google.cloud import firestore

from cleanup_tracker.adapters.firestore_documents import (
    STORE_ERRORS,
    optional_str,
    parse_timestamp,
)
from cleanup_tracker.domain.waste import NewWasteEntry, WasteEntry
from cleanup_tracker.errors import StorageError
from cleanup_tracker.services.waste import WasteEntryRepository

logger = logging.getLogger(__name__)


@dataclass
class FirestoreWasteEntryRepository(WasteEntryRepository):
    """Firestore implementation for waste entry persistence."""

    client: firestore.Client
    collection: str = "wasteEntries"

    def add_entry(self, entry: NewWasteEntry) -> str:
        """Append a waste entry document and return its id."""
        try:
            _, reference = self.client.collection(self.collection).add(
                {
                    "type": entry.type,
                    "volume": entry.volume,
                    "location": entry.location,
                    "submitterId": entry.submitter_id,
                    "submitterEmail": entry.submitter_email,
                    "createdAt": entry.created_at,
                }
            )
        except STORE_ERRORS as exc:
            logger.exception("Failed to add waste entry")
            raise StorageError(str(exc)) from exc
        return reference.id

    def list_entries(self) -> list[WasteEntry]:
        """Return every waste entry document."""
        try:
            snapshots = list(self.client.collection(self.collection).stream())
        except STORE_ERRORS as exc:
            logger.exception("Failed to list waste entries")
            raise StorageError(str(exc)) from exc
        return [
            _parse_entry(snapshot.id, snapshot.to_dict() or {})
            for snapshot in snapshots
        ]


def _parse_entry(entry_id: str, data: dict[str, object]) -> WasteEntry:
    return WasteEntry(
        id=entry_id,
        type=optional_str(data.get("type")),
        volume=optional_str(data.get("volume")),
        location=optional_str(data.get("location")),
        submitter_id=optional_str(data.get("submitterId")),
        submitter_email=optional_str(data.get("submitterEmail")),
        created_at=parse_timestamp(data.get("createdAt")),
    )
