"""Collection change subscriptions backed by periodic polling."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from cleanup_tracker.domain.changes import ChangeEvent

logger = logging.getLogger(__name__)

Snapshot = dict[str, dict[str, object]]


class CollectionReader(Protocol):
    """Reads a whole collection as documents keyed by id."""

    def read_collection(self, collection: str) -> Snapshot:
        """Return the current documents of a collection."""


class ChangeFeed(Protocol):
    """Capability for following changes to a collection."""

    def subscribe(self, collection: str) -> AsyncGenerator[ChangeEvent, None]:
        """Return a stream of change events for the collection."""


@dataclass
class PollingChangeFeed:
    """Change feed that diffs successive collection snapshots."""

    reader: CollectionReader
    collections: frozenset[str]
    interval_seconds: float = 10.0
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)

    def subscribe(self, collection: str) -> AsyncGenerator[ChangeEvent, None]:
        """Stream changes for a known collection; unknown names raise KeyError."""
        if collection not in self.collections:
            raise KeyError(collection)
        return self._poll(collection)

    async def _poll(self, collection: str) -> AsyncGenerator[ChangeEvent, None]:
        previous: Snapshot = {}
        while True:
            current = await asyncio.to_thread(self.reader.read_collection, collection)
            changes = diff_snapshots(previous, current)
            if changes:
                logger.info(
                    "Collection changed",
                    extra={"collection": collection, "changes": len(changes)},
                )
            for change in changes:
                yield change
            previous = current
            await self.sleep(self.interval_seconds)


def diff_snapshots(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    """Return the changes that turn one snapshot into the next."""
    changes: list[ChangeEvent] = []
    for document_id, document in current.items():
        if document_id not in previous:
            changes.append(ChangeEvent("added", document_id, document))
        elif previous[document_id] != document:
            changes.append(ChangeEvent("modified", document_id, document))
    for document_id in previous:
        if document_id not in current:
            changes.append(ChangeEvent("removed", document_id, None))
    return changes
