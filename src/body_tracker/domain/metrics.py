"""Domain models for body metrics and daily inputs."""

from dataclasses import dataclass, field

from body_tracker.domain.body import Gender


@dataclass(frozen=True)
class Measurement:
    """Height and weight as entered by the user."""

    height_cm: float
    weight_kg: float


@dataclass(frozen=True)
class FoodEntry:
    """Single food and quantity within a meal."""

    name: str
    quantity: float


@dataclass(frozen=True)
class Meals:
    """Food entries for the three daily meals."""

    breakfast: tuple[FoodEntry, ...] = ()
    lunch: tuple[FoodEntry, ...] = ()
    dinner: tuple[FoodEntry, ...] = ()

    def by_name(self) -> list[tuple[str, tuple[FoodEntry, ...]]]:
        """Return meals paired with their display names, in daily order."""
        return [
            ("Breakfast", self.breakfast),
            ("Lunch", self.lunch),
            ("Dinner", self.dinner),
        ]


@dataclass(frozen=True)
class Workouts:
    """Free-text workout descriptions per time slot."""

    morning: str = ""
    evening: str = ""
    night: str = ""

    def by_slot(self) -> list[tuple[str, str]]:
        """Return workout text paired with slot names, in daily order."""
        return [
            ("Morning", self.morning),
            ("Evening", self.evening),
            ("Night", self.night),
        ]


@dataclass(frozen=True)
class MetricsResult:
    """Derived BMI and calorie balance."""

    bmi: float
    calories_consumed: float
    calories_burned: float
    net_calories: float


@dataclass(frozen=True)
class ActivityRule:
    """Keyword rule mapping a workout description to a burn rate."""

    name: str
    keywords: tuple[str, ...]
    calories_per_minute: float

    def matches(self, text: str) -> bool:
        """Return True when any keyword appears in the lowercase text."""
        return any(keyword in text for keyword in self.keywords)


@dataclass(frozen=True)
class DailyEntry:
    """Everything a user enters for one day."""

    gender: Gender
    measurement: Measurement
    goal: Measurement
    meals: Meals = field(default_factory=Meals)
    workouts: Workouts = field(default_factory=Workouts)
