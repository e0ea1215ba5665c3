"""Domain models for awareness tips."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tip:
    """A short awareness tip."""

    id: str
    title: str
    content: str
