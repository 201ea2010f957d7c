"""Domain models for daily progress snapshots."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from body_tracker.domain.metrics import DailyEntry, MetricsResult


@dataclass(frozen=True)
class DailyProgress:
    """A user's inputs and derived metrics for a single day."""

    user_id: UUID
    day: date
    entry: DailyEntry
    metrics: MetricsResult
