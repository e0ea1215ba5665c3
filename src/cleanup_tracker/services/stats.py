"""Statistics service for waste entries."""

from collections import Counter
from dataclasses import dataclass

from cleanup_tracker.domain.stats import StatsSummary
from cleanup_tracker.domain.waste import WasteEntry
from cleanup_tracker.services.waste import WasteEntryRepository

UNKNOWN_TYPE = "Unknown"
UNKNOWN_USER = "unknown"


@dataclass
class StatsService:
    """Service for computing collection-wide waste statistics."""

    repository: WasteEntryRepository

    def compute_stats(self) -> StatsSummary:
        """Scan every waste entry and return total, per-type and per-user counts."""
        return aggregate_entries(self.repository.list_entries())


def aggregate_entries(entries: list[WasteEntry]) -> StatsSummary:
    """Fold waste entries into a StatsSummary."""
    by_type: Counter[str] = Counter()
    by_user: Counter[str] = Counter()
    total = 0
    for entry in entries:
        total += 1
        by_type[entry.type or UNKNOWN_TYPE] += 1
        by_user[entry.submitter_id or UNKNOWN_USER] += 1
    return StatsSummary(
        total_entries=total,
        totals_by_type=dict(by_type),
        totals_by_user=dict(by_user),
    )
