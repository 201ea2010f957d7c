"""Supabase repository for daily progress snapshots."""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from body_tracker.domain.body import Gender
from body_tracker.domain.metrics import (
    DailyEntry,
    FoodEntry,
    Meals,
    Measurement,
    MetricsResult,
    Workouts,
)
from body_tracker.domain.progress import DailyProgress
from body_tracker.services.progress import ProgressRepository

_TABLE = "daily_progress"


@dataclass
class SupabaseProgressRepository(ProgressRepository):
    """Supabase implementation for daily progress."""

    client: Client

    def upsert_progress(self, progress: DailyProgress) -> None:
        """Insert or replace the row for (user_id, date)."""
        response = (
            self.client.table(_TABLE)
            .upsert(_to_row(progress), on_conflict="user_id,date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save daily progress in Supabase")

    def get_progress(self, user_id: UUID, day: date) -> DailyProgress | None:
        """Return the snapshot for a day, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_dates(self, user_id: UUID) -> list[date]:
        """Return tracked days, most recent first."""
        response = (
            self.client.table(_TABLE)
            .select("date")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [date.fromisoformat(row["date"]) for row in response.data or []]


def _to_row(progress: DailyProgress) -> dict[str, object]:
    entry = progress.entry
    metrics = progress.metrics
    return {
        "user_id": str(progress.user_id),
        "date": progress.day.isoformat(),
        "gender": entry.gender.value,
        "height": entry.measurement.height_cm,
        "weight": entry.measurement.weight_kg,
        "goal_height": entry.goal.height_cm,
        "goal_weight": entry.goal.weight_kg,
        "bmi": _finite_or_none(metrics.bmi),
        "calories_consumed": _finite_or_none(metrics.calories_consumed),
        "calories_burned": _finite_or_none(metrics.calories_burned),
        "net_calories": _finite_or_none(metrics.net_calories),
        "breakfast": _foods_to_json(entry.meals.breakfast),
        "lunch": _foods_to_json(entry.meals.lunch),
        "dinner": _foods_to_json(entry.meals.dinner),
        "morning_workout": entry.workouts.morning or None,
        "evening_workout": entry.workouts.evening or None,
        "night_workout": entry.workouts.night or None,
        "updated_at": datetime.now(tz=UTC).isoformat(),
    }


def _foods_to_json(foods: tuple[FoodEntry, ...]) -> list[dict[str, object]]:
    return [{"name": food.name, "quantity": food.quantity} for food in foods]


def _foods_from_json(raw: object) -> tuple[FoodEntry, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(
        FoodEntry(
            name=str(item.get("name", "")),
            quantity=float(item.get("quantity", 0)),
        )
        for item in raw
        if isinstance(item, dict)
    )


def _parse_row(row: dict[str, object]) -> DailyProgress:
    entry = DailyEntry(
        gender=Gender(row.get("gender") or Gender.MALE),
        measurement=Measurement(
            height_cm=float(row.get("height", 0.0)),
            weight_kg=float(row.get("weight", 0.0)),
        ),
        goal=Measurement(
            height_cm=float(row.get("goal_height") or 0.0),
            weight_kg=float(row.get("goal_weight") or 0.0),
        ),
        meals=Meals(
            breakfast=_foods_from_json(row.get("breakfast")),
            lunch=_foods_from_json(row.get("lunch")),
            dinner=_foods_from_json(row.get("dinner")),
        ),
        workouts=Workouts(
            morning=str(row.get("morning_workout") or ""),
            evening=str(row.get("evening_workout") or ""),
            night=str(row.get("night_workout") or ""),
        ),
    )
    metrics = MetricsResult(
        bmi=_float_or_nan(row.get("bmi")),
        calories_consumed=_float_or_nan(row.get("calories_consumed")),
        calories_burned=_float_or_nan(row.get("calories_burned")),
        net_calories=_float_or_nan(row.get("net_calories")),
    )
    return DailyProgress(
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        entry=entry,
        metrics=metrics,
    )


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _float_or_nan(value: object) -> float:
    return math.nan if value is None else float(value)
