"""Daily progress snapshots."""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from body_tracker.domain.catalog import FOOD_CATALOG, FoodCatalog
from body_tracker.domain.metrics import DailyEntry
from body_tracker.domain.progress import DailyProgress
from body_tracker.services.metrics import compute_metrics

_logger = logging.getLogger(__name__)


class ProgressRepository(Protocol):
    """Persistence interface for daily progress."""

    def upsert_progress(self, progress: DailyProgress) -> None:
        """Insert or replace the snapshot for (user, day)."""

    def get_progress(self, user_id: UUID, day: date) -> DailyProgress | None:
        """Return the snapshot for a day, if any."""

    def list_dates(self, user_id: UUID) -> list[date]:
        """Return tracked days, most recent first."""


class FutureDateError(ValueError):
    """Raised when saving progress for a day after today."""


@dataclass
class DailyProgressService:
    """Service that computes and stores one snapshot per user per day."""

    repository: ProgressRepository
    catalog: FoodCatalog = field(default_factory=lambda: FOOD_CATALOG)

    def save_day(
        self, user_id: UUID, day: date, entry: DailyEntry, today: date
    ) -> DailyProgress:
        """Compute metrics for the entry and persist the day's snapshot."""
        if day > today:
            raise FutureDateError(f"Cannot record progress for {day.isoformat()}")
        metrics = compute_metrics(
            entry.measurement, entry.meals, entry.workouts, self.catalog
        )
        progress = DailyProgress(user_id=user_id, day=day, entry=entry, metrics=metrics)
        self.repository.upsert_progress(progress)
        _logger.info(
            "Saved progress: user=%s day=%s bmi=%.1f net=%s",
            user_id,
            day.isoformat(),
            metrics.bmi,
            metrics.net_calories,
        )
        return progress

    def get_day(self, user_id: UUID, day: date) -> DailyProgress | None:
        """Return the stored snapshot for a day."""
        return self.repository.get_progress(user_id, day)

    def list_dates(self, user_id: UUID) -> list[date]:
        """Return the days the user has tracked."""
        return self.repository.list_dates(user_id)


def previous_day(day: date) -> date:
    """Return the day before."""
    return day - timedelta(days=1)


def next_day(day: date, today: date) -> date | None:
    """Return the day after, or None when that would be in the future."""
    candidate = day + timedelta(days=1)
    if candidate > today:
        return None
    return candidate
