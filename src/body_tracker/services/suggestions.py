"""AI coaching suggestions built from the day's metrics."""

from dataclasses import dataclass
from typing import Protocol

from body_tracker.domain.metrics import Meals, Workouts

SYSTEM_PROMPT = (
    "You are an expert fitness and nutrition coach. Provide personalized, "
    "actionable advice based on the user's current stats, goals, diet, and "
    "workout routine.\n\n"
    "Give specific suggestions for:\n"
    "1. Diet modifications (what to eat more/less of)\n"
    "2. Workout improvements (types, duration, intensity)\n"
    "3. Lifestyle changes\n"
    "4. Timeline to reach goals\n\n"
    "Be encouraging but realistic. Focus on sustainable, healthy changes."
)


class SuggestionError(RuntimeError):
    """Raised when the suggestion backend fails."""

    status_code = 500


class SuggestionRateLimitError(SuggestionError):
    """Raised when the suggestion backend rate limits the request."""

    status_code = 429


class SuggestionPaymentRequiredError(SuggestionError):
    """Raised when the suggestion backend account is out of credits."""

    status_code = 402


@dataclass(frozen=True)
class SuggestionRequest:
    """Flattened stats, goals and routine text sent to the coach."""

    current_height: float
    current_weight: float
    goal_height: float
    goal_weight: float
    bmi: float
    calories_consumed: float
    calories_burned: float
    net_calories: float
    diet: str
    workouts: str


class SuggestionClient(Protocol):
    """Interface for chat-completion text generation."""

    async def complete(
        self, *, model: str, system_prompt: str, user_prompt: str
    ) -> str:
        """Return generated text for the prompts."""


@dataclass
class SuggestionService:
    """Service that formats coaching prompts and requests suggestions."""

    client: SuggestionClient
    model: str

    async def suggest(self, request: SuggestionRequest) -> str:
        """Return coaching text for the request."""
        return await self.client.complete(
            model=self.model,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_user_prompt(request),
        )


def format_diet(meals: Meals) -> str:
    """Render meals as one line per meal."""
    lines = []
    for meal_name, foods in meals.by_name():
        if not foods:
            lines.append(f"{meal_name}: Not specified")
            continue
        described = ", ".join(
            f"{food.name} ({_format_number(food.quantity)})" for food in foods
        )
        lines.append(f"{meal_name}: {described}")
    return "\n".join(lines)


def format_workouts(workouts: Workouts) -> str:
    """Render non-empty workout slots, one per line."""
    lines = [f"{slot}: {text}" for slot, text in workouts.by_slot() if text]
    return "\n".join(lines) if lines else "No workouts specified"


def build_user_prompt(request: SuggestionRequest) -> str:
    """Render the user's stats and routine into the coaching prompt."""
    sign = "+" if request.net_calories > 0 else ""
    return (
        "Current Stats:\n"
        f"- Height: {_format_number(request.current_height)} cm\n"
        f"- Weight: {_format_number(request.current_weight)} kg\n"
        f"- BMI: {request.bmi:.1f}\n\n"
        "Goal Stats:\n"
        f"- Target Height: {_format_number(request.goal_height)} cm\n"
        f"- Target Weight: {_format_number(request.goal_weight)} kg\n\n"
        "Daily Nutrition:\n"
        f"- Calories Consumed: {_format_number(request.calories_consumed)} kcal\n"
        f"- Calories Burned: {_format_number(request.calories_burned)} kcal\n"
        f"- Net Calories: {sign}{_format_number(request.net_calories)} kcal\n\n"
        "Current Diet:\n"
        f"{request.diet}\n\n"
        "Current Workouts:\n"
        f"{request.workouts}\n\n"
        "Please provide personalized suggestions to help reach the goal stats."
    )


def _format_number(value: float) -> str:
    """Format whole numbers without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
