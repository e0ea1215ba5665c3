"""Awareness tips service."""

from dataclasses import dataclass
from typing import Protocol

from cleanup_tracker.domain.tips import Tip

DEFAULT_TIPS = (
    Tip(
        id="1",
        title="Segregate Your Waste",
        content=(
            "Properly separate biodegradables (nabubulok) from non-biodegradables "
            "(di-nabubulok) to help waste collection and recycling."
        ),
    ),
    Tip(
        id="2",
        title="Reduce Single-Use Plastics",
        content=(
            "Bring your own eco-bag when shopping and use a reusable water bottle "
            "instead of buying bottled water."
        ),
    ),
    Tip(
        id="3",
        title="Conserve Water",
        content=(
            "Simple acts like turning off the tap while brushing your teeth can "
            "save gallons of water every day."
        ),
    ),
    Tip(
        id="4_las_pinas",
        title="Know Your Local MRF",
        content=(
            "Find your local Materials Recovery Facility (MRF) in Las Piñas to "
            "dispose of recyclables properly."
        ),
    ),
)


class TipRepository(Protocol):
    """Persistence interface for awareness tips."""

    def list_tips(self) -> list[Tip]:
        """Return every stored tip."""


@dataclass
class TipService:
    """Service for reading awareness tips."""

    repository: TipRepository

    def list_tips(self) -> list[Tip]:
        """Return stored tips, or the built-in defaults when none are stored."""
        tips = self.repository.list_tips()
        return tips or list(DEFAULT_TIPS)
