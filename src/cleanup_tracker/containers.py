"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from google.cloud import firestore

from cleanup_tracker.adapters.firestore_client import create_firestore_client
from cleanup_tracker.adapters.firestore_collection_reader import (
    FirestoreCollectionReader,
)
from cleanup_tracker.adapters.firestore_event_repository import (
    FirestoreEventRepository,
)
from cleanup_tracker.adapters.firestore_tip_repository import FirestoreTipRepository
from cleanup_tracker.adapters.firestore_waste_repository import (
    FirestoreWasteEntryRepository,
)
from cleanup_tracker.config import Settings
from cleanup_tracker.services.changes import ChangeFeed, PollingChangeFeed
from cleanup_tracker.services.events import EventService
from cleanup_tracker.services.stats import StatsService
from cleanup_tracker.services.tips import TipService
from cleanup_tracker.services.waste import WasteService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    waste_service: WasteService
    event_service: EventService
    stats_service: StatsService
    tip_service: TipService
    change_feed: ChangeFeed
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, client: firestore.Client | None = None
) -> AppContainer:
    """Create the default dependency container.

    Raises ConfigError when no client is given and no Firestore credentials
    are configured.
    """
    resolved_settings = settings or Settings()
    firestore_client = client or create_firestore_client(resolved_settings)
    waste_repository = FirestoreWasteEntryRepository(
        firestore_client, collection=resolved_settings.waste_collection
    )
    event_repository = FirestoreEventRepository(
        firestore_client, collection=resolved_settings.events_collection
    )
    tip_repository = FirestoreTipRepository(
        firestore_client, collection=resolved_settings.tips_collection
    )
    change_feed = PollingChangeFeed(
        reader=FirestoreCollectionReader(firestore_client),
        collections=frozenset(
            {
                resolved_settings.waste_collection,
                resolved_settings.events_collection,
                resolved_settings.tips_collection,
            }
        ),
        interval_seconds=resolved_settings.change_poll_interval_seconds,
    )

    async def close_resources() -> None:
        firestore_client.close()

    return AppContainer(
        settings=resolved_settings,
        waste_service=WasteService(waste_repository),
        event_service=EventService(event_repository),
        stats_service=StatsService(waste_repository),
        tip_service=TipService(tip_repository),
        change_feed=change_feed,
        close_resources=close_resources,
    )
