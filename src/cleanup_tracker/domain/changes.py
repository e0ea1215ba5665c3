"""Domain models for collection change notifications."""

from dataclasses import dataclass
from typing import Literal

ChangeKind = Literal["added", "modified", "removed"]


@dataclass(frozen=True)
class ChangeEvent:
    """A single document change observed in a collection."""

    kind: ChangeKind
    document_id: str
    document: dict[str, object] | None
