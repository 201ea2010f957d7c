"""BMI and calorie balance calculations."""

import math
import re
from collections.abc import Iterable

from body_tracker.domain.catalog import FOOD_CATALOG, FoodCatalog, FoodUnit
from body_tracker.domain.metrics import (
    ActivityRule,
    FoodEntry,
    Meals,
    Measurement,
    MetricsResult,
    Workouts,
)

DEFAULT_WORKOUT_MINUTES = 30
DEFAULT_CALORIES_PER_MINUTE = 5.0

# Checked in order; the first match wins.
ACTIVITY_RULES: tuple[ActivityRule, ...] = (
    ActivityRule("running", ("running", "jogging"), 10),
    ActivityRule("walking", ("walking",), 4),
    ActivityRule("strength", ("gym", "weight"), 6),
    ActivityRule("yoga", ("yoga",), 3),
    ActivityRule("cycling", ("cycling",), 8),
    ActivityRule("swimming", ("swimming",), 11),
    ActivityRule("sports", ("sports", "football", "cricket"), 7),
)

_DURATION_PATTERN = re.compile(r"(\d+)\s*(min|minute|hour|hr)", re.IGNORECASE)

_MEAL_BASE_CALORIES = 300
_MEAL_KEYWORD_CALORIES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("toast", "bread"), 80),
    (("milk",), 100),
    (("rice",), 200),
    (("roti", "chapati"), 140),
    (("dal",), 150),
    (("chicken",), 200),
    (("paneer",), 250),
    (("curry",), 150),
    (("vegetable",), 50),
    (("salad",), 30),
    (("fruit",), 60),
    (("juice",), 100),
)
_EGG_CALORIES = 70

SURPLUS_THRESHOLD = 500
DEFICIT_THRESHOLD = -500


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """Return BMI, or NaN when height or weight is not strictly positive."""
    if height_cm <= 0 or weight_kg <= 0:
        return math.nan
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def food_calories(
    name: str, quantity: float, catalog: FoodCatalog = FOOD_CATALOG
) -> float:
    """Return calories for a quantity of a catalog food; unknown foods count 0."""
    entry = catalog.lookup(name)
    if entry is None:
        return 0.0
    if entry.unit is FoodUnit.GRAMS_PER_100:
        return entry.calories_per_unit * quantity / 100
    return entry.calories_per_unit * quantity


def meal_calories(
    entries: Iterable[FoodEntry], catalog: FoodCatalog = FOOD_CATALOG
) -> float:
    """Sum calories for the foods in one meal."""
    return sum(
        (food_calories(entry.name, entry.quantity, catalog) for entry in entries),
        0.0,
    )


def meals_calories(meals: Meals, catalog: FoodCatalog = FOOD_CATALOG) -> float:
    """Sum calories across breakfast, lunch and dinner."""
    return sum(
        (meal_calories(entries, catalog) for _, entries in meals.by_name()), 0.0
    )


def workout_minutes(text: str) -> float:
    """Extract a duration in minutes, defaulting to 30."""
    match = _DURATION_PATTERN.search(text)
    if match is None:
        return float(DEFAULT_WORKOUT_MINUTES)
    amount = float(match.group(1))
    unit = match.group(2).lower()
    if unit in {"hour", "hr"}:
        return amount * 60
    return amount


def activity_rate(text: str) -> float:
    """Return calories per minute for the first activity rule that matches."""
    lowered = text.lower()
    for rule in ACTIVITY_RULES:
        if rule.matches(lowered):
            return rule.calories_per_minute
    return DEFAULT_CALORIES_PER_MINUTE


def workout_calories(text: str) -> float:
    """Estimate calories burned for one free-text workout description."""
    if not text or not text.strip():
        return 0.0
    return workout_minutes(text) * activity_rate(text)


def workouts_calories(workouts: Workouts) -> float:
    """Sum burned calories across the morning, evening and night slots."""
    return sum((workout_calories(text) for _, text in workouts.by_slot()), 0.0)


def net_calories(consumed: float, burned: float) -> float:
    """Return consumed minus burned; positive means surplus."""
    return consumed - burned


def compute_metrics(
    measurement: Measurement,
    meals: Meals,
    workouts: Workouts,
    catalog: FoodCatalog = FOOD_CATALOG,
) -> MetricsResult:
    """Derive BMI and the day's calorie balance."""
    consumed = meals_calories(meals, catalog)
    burned = workouts_calories(workouts)
    return MetricsResult(
        bmi=compute_bmi(measurement.height_cm, measurement.weight_kg),
        calories_consumed=consumed,
        calories_burned=burned,
        net_calories=net_calories(consumed, burned),
    )


def estimate_meal_text_calories(meal: str) -> float:
    """Rough calorie estimate for a meal described in free text."""
    if not meal or not meal.strip():
        return 0.0
    lowered = meal.lower()
    calories = _MEAL_BASE_CALORIES
    if "egg" in lowered:
        calories += _EGG_CALORIES * lowered.count("egg")
    for keywords, bonus in _MEAL_KEYWORD_CALORIES:
        if any(keyword in lowered for keyword in keywords):
            calories += bonus
    return float(calories)


def estimate_diet_calories(breakfast: str, lunch: str, dinner: str) -> float:
    """Rough calorie estimate for a day of free-text meals."""
    return (
        estimate_meal_text_calories(breakfast)
        + estimate_meal_text_calories(lunch)
        + estimate_meal_text_calories(dinner)
    )


def bmi_progress(bmi: float) -> float:
    """Return BMI as a percentage of a 40-point gauge, capped at 100."""
    return min(bmi / 40 * 100, 100.0)


def describe_calorie_balance(net: float) -> str:
    """Return a short description of a net calorie figure."""
    if net > SURPLUS_THRESHOLD:
        return "Calorie surplus - may gain weight"
    if net < DEFICIT_THRESHOLD:
        return "Calorie deficit - may lose weight"
    return "Balanced calorie intake"
