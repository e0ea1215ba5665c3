"""Domain models for statistics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StatsSummary:
    """Counts over the whole waste entry collection."""

    total_entries: int = 0
    totals_by_type: dict[str, int] = field(default_factory=dict)
    totals_by_user: dict[str, int] = field(default_factory=dict)
