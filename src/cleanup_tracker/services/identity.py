"""Submitter identity checks shared by write services."""

from cleanup_tracker.domain.models import Submitter
from cleanup_tracker.errors import Unauthorized


def require_submitter(submitter: Submitter | None) -> Submitter:
    """Return the submitter, or raise Unauthorized when no uid is present."""
    if submitter is None or not submitter.uid:
        raise Unauthorized()
    return submitter
