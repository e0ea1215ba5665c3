"""Firestore client construction from service account credentials."""

import json
import logging
from pathlib import Path

from google.cloud import firestore
from google.oauth2 import service_account

from cleanup_tracker.config import Settings
from cleanup_tracker.errors import ConfigError

logger = logging.getLogger(__name__)


def load_credentials(settings: Settings) -> service_account.Credentials:
    """Load credentials from the env blob, falling back to the local key file."""
    if settings.firebase_service_account:
        try:
            info = json.loads(settings.firebase_service_account)
        except ValueError as exc:
            raise ConfigError("FIREBASE_SERVICE_ACCOUNT is not valid JSON") from exc
        if not isinstance(info, dict):
            raise ConfigError("FIREBASE_SERVICE_ACCOUNT must be a JSON object")
        return service_account.Credentials.from_service_account_info(info)

    path = Path(settings.firebase_credentials_file)
    if path.is_file():
        logger.info("Using Firestore credentials file", extra={"path": str(path)})
        return service_account.Credentials.from_service_account_file(str(path))

    raise ConfigError(
        "Missing Firestore credentials: set FIREBASE_SERVICE_ACCOUNT or provide "
        f"{settings.firebase_credentials_file}"
    )


def create_firestore_client(settings: Settings) -> firestore.Client:
    """Create a Firestore client for the configured project."""
    credentials = load_credentials(settings)
    project = settings.firestore_project_id or credentials.project_id
    return firestore.Client(project=project, credentials=credentials)
