"""Tests for stats service."""

from cleanup_tracker.domain.models import Submitter
from cleanup_tracker.domain.stats import StatsSummary
from cleanup_tracker.domain.waste import WasteEntry
from cleanup_tracker.services.stats import StatsService, aggregate_entries
from cleanup_tracker.services.waste import WasteService
from tests.conftest import InMemoryWasteEntryRepository


def _entry(
    entry_id: str, waste_type: str | None, submitter_id: str | None
) -> WasteEntry:
    return WasteEntry(
        id=entry_id,
        type=waste_type,
        volume="1 bag",
        location="Talon",
        submitter_id=submitter_id,
        submitter_email=None,
        created_at=None,
    )


def test_compute_stats_on_empty_collection() -> None:
    service = StatsService(InMemoryWasteEntryRepository())

    assert service.compute_stats() == StatsSummary(
        total_entries=0, totals_by_type={}, totals_by_user={}
    )


def test_compute_stats_counts_by_type_and_user() -> None:
    repository = InMemoryWasteEntryRepository()
    waste_service = WasteService(repository)
    waste_service.create_entry("Plastic", "5 bags", "Zapote", Submitter(uid="u1"))
    waste_service.create_entry("Plastic", "2 kg", "Talon", Submitter(uid="u2"))

    summary = StatsService(repository).compute_stats()

    assert summary.total_entries == 2
    assert summary.totals_by_type == {"Plastic": 2}
    assert summary.totals_by_user == {"u1": 1, "u2": 1}


def test_missing_type_and_submitter_fall_back_to_unknown() -> None:
    summary = aggregate_entries(
        [_entry("a", None, "u1"), _entry("b", "", None), _entry("c", "Glass", "u1")]
    )

    assert summary.totals_by_type == {"Unknown": 2, "Glass": 1}
    assert summary.totals_by_user == {"u1": 2, "unknown": 1}


def test_totals_always_sum_to_entry_count() -> None:
    repository = InMemoryWasteEntryRepository()
    waste_service = WasteService(repository)
    types = ["Mixed", "Paper", None, "Organic", "Paper", "Other", "Mixed"]
    for index, waste_type in enumerate(types):
        waste_service.create_entry(
            waste_type, "1 bag", "Zapote", Submitter(uid=f"u{index % 3}")
        )

    summary = StatsService(repository).compute_stats()

    assert summary.total_entries == len(types)
    assert sum(summary.totals_by_type.values()) == len(types)
    assert sum(summary.totals_by_user.values()) == len(types)


def test_compute_stats_is_repeatable() -> None:
    repository = InMemoryWasteEntryRepository()
    WasteService(repository).create_entry("Paper", "3 kg", "Talon", Submitter("u1"))
    service = StatsService(repository)

    assert service.compute_stats() == service.compute_stats()


def test_aggregation_ignores_entry_order() -> None:
    entries = [_entry("a", "Glass", "u1"), _entry("b", "Paper", "u2")]

    assert aggregate_entries(entries) == aggregate_entries(list(reversed(entries)))
