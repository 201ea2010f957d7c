"""Pydantic request and response models for the HTTP API."""

import math
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from body_tracker.domain.body import BmiCategory, BodyScaleResult, Gender
from body_tracker.domain.catalog import FoodCatalogEntry, FoodUnit
from body_tracker.domain.metrics import (
    DailyEntry,
    FoodEntry,
    Meals,
    Measurement,
    MetricsResult,
    Workouts,
)
from body_tracker.domain.progress import DailyProgress
from body_tracker.services.suggestions import (
    SuggestionRequest,
    format_diet,
    format_workouts,
)


class FoodItemModel(BaseModel):
    """Food name and quantity (grams or pieces, per the catalog unit)."""

    name: str = Field(min_length=1)
    quantity: float = Field(ge=0)

    def to_domain(self) -> FoodEntry:
        return FoodEntry(name=self.name, quantity=self.quantity)


class MealsModel(BaseModel):
    """Foods eaten at each meal."""

    breakfast: list[FoodItemModel] = Field(default_factory=list)
    lunch: list[FoodItemModel] = Field(default_factory=list)
    dinner: list[FoodItemModel] = Field(default_factory=list)

    def to_domain(self) -> Meals:
        return Meals(
            breakfast=tuple(item.to_domain() for item in self.breakfast),
            lunch=tuple(item.to_domain() for item in self.lunch),
            dinner=tuple(item.to_domain() for item in self.dinner),
        )

    @classmethod
    def from_domain(cls, meals: Meals) -> "MealsModel":
        return cls(
            breakfast=[_food_model(food) for food in meals.breakfast],
            lunch=[_food_model(food) for food in meals.lunch],
            dinner=[_food_model(food) for food in meals.dinner],
        )


class WorkoutsModel(BaseModel):
    """Free-text workouts per time slot."""

    morning: str = ""
    evening: str = ""
    night: str = ""

    def to_domain(self) -> Workouts:
        return Workouts(morning=self.morning, evening=self.evening, night=self.night)


class MetricsRequest(BaseModel):
    """Inputs for a one-off metrics computation."""

    gender: Gender
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    meals: MealsModel = Field(default_factory=MealsModel)
    workouts: WorkoutsModel = Field(default_factory=WorkoutsModel)


class ProgressRequest(MetricsRequest):
    """Inputs recorded for a day."""

    goal_height_cm: float = Field(default=0, ge=0)
    goal_weight_kg: float = Field(default=0, ge=0)

    def to_domain(self) -> DailyEntry:
        return DailyEntry(
            gender=self.gender,
            measurement=Measurement(height_cm=self.height_cm, weight_kg=self.weight_kg),
            goal=Measurement(
                height_cm=self.goal_height_cm, weight_kg=self.goal_weight_kg
            ),
            meals=self.meals.to_domain(),
            workouts=self.workouts.to_domain(),
        )


class MetricsModel(BaseModel):
    """BMI and calorie balance; non-finite values are null."""

    bmi: float | None
    calories_consumed: float | None
    calories_burned: float | None
    net_calories: float | None

    @classmethod
    def from_domain(cls, metrics: MetricsResult) -> "MetricsModel":
        return cls(
            bmi=_finite_or_none(metrics.bmi),
            calories_consumed=_finite_or_none(metrics.calories_consumed),
            calories_burned=_finite_or_none(metrics.calories_burned),
            net_calories=_finite_or_none(metrics.net_calories),
        )


class BodyModel(BaseModel):
    """Renderer parameters."""

    scale_factors: dict[str, float | None]
    color_category: BmiCategory | None
    color: str

    @classmethod
    def from_domain(cls, body: BodyScaleResult, color: str) -> "BodyModel":
        return cls(
            scale_factors={
                name: _finite_or_none(value) for name, value in body.factors().items()
            },
            color_category=body.color_category,
            color=color,
        )


class MetricsResponse(BaseModel):
    """Computed metrics plus the body parameters they drive."""

    metrics: MetricsModel
    body: BodyModel
    bmi_progress: float | None
    calorie_balance: str


class ProgressResponse(BaseModel):
    """Stored snapshot for one day."""

    day: date
    gender: Gender
    height_cm: float
    weight_kg: float
    goal_height_cm: float
    goal_weight_kg: float
    meals: MealsModel
    workouts: WorkoutsModel
    metrics: MetricsModel

    @classmethod
    def from_domain(cls, progress: DailyProgress) -> "ProgressResponse":
        entry = progress.entry
        return cls(
            day=progress.day,
            gender=entry.gender,
            height_cm=entry.measurement.height_cm,
            weight_kg=entry.measurement.weight_kg,
            goal_height_cm=entry.goal.height_cm,
            goal_weight_kg=entry.goal.weight_kg,
            meals=MealsModel.from_domain(entry.meals),
            workouts=WorkoutsModel(
                morning=entry.workouts.morning,
                evening=entry.workouts.evening,
                night=entry.workouts.night,
            ),
            metrics=MetricsModel.from_domain(progress.metrics),
        )


class SuggestionRequestModel(BaseModel):
    """Suggestion payload; accepts camelCase keys from the web client.

    Diet and workouts may be sent as preformatted text or as the same
    structured meals and workout slots used by /metrics.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_height: float
    current_weight: float
    goal_height: float
    goal_weight: float
    bmi: float
    calories_consumed: float
    calories_burned: float
    net_calories: float
    diet: str | MealsModel = ""
    workouts: str | WorkoutsModel = ""

    def to_domain(self) -> SuggestionRequest:
        diet = self.diet
        if isinstance(diet, MealsModel):
            diet = format_diet(diet.to_domain())
        workouts = self.workouts
        if isinstance(workouts, WorkoutsModel):
            workouts = format_workouts(workouts.to_domain())
        return SuggestionRequest(
            **self.model_dump(exclude={"diet", "workouts"}),
            diet=diet,
            workouts=workouts,
        )


class DietTextModel(BaseModel):
    """Free-text meals for a quick calorie estimate."""

    breakfast: str = ""
    lunch: str = ""
    dinner: str = ""


class FoodCatalogModel(BaseModel):
    """Catalog entry as exposed to clients."""

    key: str
    calories_per_unit: float
    unit: FoodUnit

    @classmethod
    def from_domain(cls, entry: FoodCatalogEntry) -> "FoodCatalogModel":
        return cls(
            key=entry.key, calories_per_unit=entry.calories_per_unit, unit=entry.unit
        )


def _food_model(food: FoodEntry) -> FoodItemModel:
    return FoodItemModel.model_construct(name=food.name, quantity=food.quantity)


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None
