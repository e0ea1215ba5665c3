"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from cleanup_tracker.adapters.firestore_documents import optional_str
from cleanup_tracker.config import Settings
from cleanup_tracker.containers import AppContainer
from cleanup_tracker.domain.events import Event, NewEvent
from cleanup_tracker.domain.tips import Tip
from cleanup_tracker.domain.waste import NewWasteEntry, WasteEntry
from cleanup_tracker.errors import StorageError
from cleanup_tracker.services.changes import (
    CollectionReader,
    PollingChangeFeed,
    Snapshot,
)
from cleanup_tracker.services.events import EventRepository, EventService
from cleanup_tracker.services.stats import StatsService
from cleanup_tracker.services.tips import TipRepository, TipService
from cleanup_tracker.services.waste import WasteEntryRepository, WasteService


@dataclass
class InMemoryWasteEntryRepository(WasteEntryRepository):
    """In-memory waste entry repository for tests."""

    entries: list[WasteEntry] = field(default_factory=list)
    fail: bool = False

    def add_entry(self, entry: NewWasteEntry) -> str:
        if self.fail:
            raise StorageError("store unavailable")
        entry_id = uuid4().hex
        self.entries.append(
            WasteEntry(
                id=entry_id,
                type=optional_str(entry.type),
                volume=optional_str(entry.volume),
                location=optional_str(entry.location),
                submitter_id=entry.submitter_id,
                submitter_email=entry.submitter_email,
                created_at=entry.created_at,
            )
        )
        return entry_id

    def list_entries(self) -> list[WasteEntry]:
        if self.fail:
            raise StorageError("store unavailable")
        return list(self.entries)


@dataclass
class InMemoryEventRepository(EventRepository):
    """In-memory event repository for tests."""

    events: list[Event] = field(default_factory=list)
    fail: bool = False

    def add_event(self, event: NewEvent) -> str:
        if self.fail:
            raise StorageError("store unavailable")
        event_id = uuid4().hex
        self.events.append(
            Event(
                id=event_id,
                title=optional_str(event.title),
                description=optional_str(event.description),
                location=optional_str(event.location),
                date=optional_str(event.date),
                creator_id=event.creator_id,
                creator_email=event.creator_email,
                created_at=event.created_at,
            )
        )
        return event_id

    def list_events(self) -> list[Event]:
        if self.fail:
            raise StorageError("store unavailable")
        return list(self.events)


@dataclass
class InMemoryTipRepository(TipRepository):
    """In-memory tip repository for tests."""

    tips: list[Tip] = field(default_factory=list)
    fail: bool = False

    def list_tips(self) -> list[Tip]:
        if self.fail:
            raise StorageError("store unavailable")
        return list(self.tips)


@dataclass
class InMemoryCollectionReader(CollectionReader):
    """Collection reader serving fixed snapshots."""

    snapshots: dict[str, Snapshot] = field(default_factory=dict)
    fail: bool = False

    def read_collection(self, collection: str) -> Snapshot:
        if self.fail:
            raise StorageError("store unavailable")
        return dict(self.snapshots.get(collection, {}))


@dataclass
class FakeDocumentReference:
    id: str


@dataclass
class FakeDocumentSnapshot:
    id: str
    data: dict[str, object] | None

    def to_dict(self) -> dict[str, object] | None:
        return self.data


@dataclass
class FakeCollection:
    """Mimics the parts of a Firestore collection reference we use."""

    documents: dict[str, dict[str, object]] = field(default_factory=dict)
    error: Exception | None = None

    def add(self, data: dict[str, object]) -> tuple[None, FakeDocumentReference]:
        if self.error:
            raise self.error
        doc_id = f"doc-{len(self.documents) + 1}"
        self.documents[doc_id] = data
        return None, FakeDocumentReference(doc_id)

    def stream(self):  # type: ignore[no-untyped-def]
        if self.error:
            raise self.error
        return iter(
            [FakeDocumentSnapshot(key, value) for key, value in self.documents.items()]
        )


@dataclass
class FakeFirestoreClient:
    """Fake Firestore client holding collections in memory."""

    collections: dict[str, FakeCollection] = field(default_factory=dict)
    closed: bool = False

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    def close(self) -> None:
        self.closed = True


async def _no_wait(_seconds: float) -> None:
    return None


@pytest.fixture
def settings(tmp_path) -> Settings:  # type: ignore[no-untyped-def]
    return Settings(
        cors_origins="http://localhost:5173",
        firebase_service_account=None,
        firebase_credentials_file=str(tmp_path / "serviceAccountKey.json"),
    )


@pytest.fixture
def collection_reader() -> InMemoryCollectionReader:
    return InMemoryCollectionReader()


@pytest.fixture
def container(
    settings: Settings, collection_reader: InMemoryCollectionReader
) -> AppContainer:
    waste_repository = InMemoryWasteEntryRepository()
    change_feed = PollingChangeFeed(
        reader=collection_reader,
        collections=frozenset(
            {
                settings.waste_collection,
                settings.events_collection,
                settings.tips_collection,
            }
        ),
        interval_seconds=0,
        sleep=_no_wait,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        waste_service=WasteService(waste_repository),
        event_service=EventService(InMemoryEventRepository()),
        stats_service=StatsService(waste_repository),
        tip_service=TipService(InMemoryTipRepository()),
        change_feed=change_feed,
        close_resources=close_resources,
    )
