"""Domain models for the clean-up tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Submitter:
    """Identity attributed to a written document."""

    uid: str
    email: str | None = None
