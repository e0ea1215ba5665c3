"""Firestore repository for awareness tips."""

import logging
from dataclasses import dataclass

from google.cloud import firestore

from cleanup_tracker.adapters.firestore_documents import STORE_ERRORS
from cleanup_tracker.domain.tips import Tip
from cleanup_tracker.errors import StorageError
from cleanup_tracker.services.tips import TipRepository

logger = logging.getLogger(__name__)


@dataclass
class FirestoreTipRepository(TipRepository):
    """Firestore-backed tip repository."""

    client: firestore.Client
    collection: str = "tips"

    def list_tips(self) -> list[Tip]:
        """Return every tip document."""
        try:
            snapshots = list(self.client.collection(self.collection).stream())
        except STORE_ERRORS as exc:
            logger.exception("Failed to list tips")
            raise StorageError(str(exc)) from exc
        tips = []
        for snapshot in snapshots:
            data = snapshot.to_dict() or {}
            tips.append(
                Tip(
                    id=snapshot.id,
                    title=str(data.get("title", "")),
                    content=str(data.get("content", "")),
                )
            )
        return tips
