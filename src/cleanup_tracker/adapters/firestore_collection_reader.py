"""Firestore reader used by the polling change feed."""

import logging
from dataclasses import dataclass

from google.cloud import firestore

from cleanup_tracker.adapters.firestore_documents import STORE_ERRORS
from cleanup_tracker.errors import StorageError
from cleanup_tracker.services.changes import CollectionReader, Snapshot

logger = logging.getLogger(__name__)


@dataclass
class FirestoreCollectionReader(CollectionReader):
    """Reads whole Firestore collections keyed by document id."""

    client: firestore.Client

    def read_collection(self, collection: str) -> Snapshot:
        """Return the current documents of a collection."""
        try:
            return {
                snapshot.id: snapshot.to_dict() or {}
                for snapshot in self.client.collection(collection).stream()
            }
        except STORE_ERRORS as exc:
            logger.exception(
                "Failed to read collection", extra={"collection": collection}
            )
            raise StorageError(str(exc)) from exc
