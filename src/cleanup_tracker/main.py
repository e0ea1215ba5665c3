"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from cleanup_tracker.api.app import create_app
from cleanup_tracker.app_logging import configure_logging
from cleanup_tracker.config import Settings
from cleanup_tracker.containers import build_container
from cleanup_tracker.errors import ConfigError

logger = logging.getLogger(__name__)


def main() -> None:
    """Build the application and serve it on the configured host and port."""
    configure_logging()
    settings = Settings()
    try:
        container = build_container(settings)
    except ConfigError:
        logger.exception("Cannot start the clean-up tracker API")
        raise SystemExit(1) from None
    logger.info("Clean-Up Tracker API listening on port %s", settings.port)
    uvicorn.run(create_app(container), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
