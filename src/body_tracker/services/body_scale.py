"""Map BMI and calorie balance to body mesh proportions."""

import math
from collections.abc import Mapping
from types import MappingProxyType

from body_tracker.domain.body import (
    BmiCategory,
    BodyScaleResult,
    Gender,
    GenderPreset,
    ScaleSpec,
)

REFERENCE_BMI = 22.0
CALORIES_PER_KG_SHIFT = 3500.0
MAX_CALORIE_EFFECT = 0.1

_CATEGORY_BREAKPOINTS: tuple[tuple[float, BmiCategory], ...] = (
    (18.5, BmiCategory.UNDERWEIGHT),
    (25.0, BmiCategory.NORMAL),
    (30.0, BmiCategory.OVERWEIGHT),
)

CATEGORY_COLORS: Mapping[BmiCategory, str] = MappingProxyType(
    {
        BmiCategory.UNDERWEIGHT: "#FFA726",
        BmiCategory.NORMAL: "#66BB6A",
        BmiCategory.OVERWEIGHT: "#FFA726",
        BmiCategory.OBESE: "#EF5350",
    }
)
NEUTRAL_COLOR = "#FFD8B1"

SCALE_SPECS: tuple[ScaleSpec, ...] = (
    ScaleSpec("torso_width", 0.04, 0.7, 2.2, calorie_sensitive=True),
    ScaleSpec("limb_width", 0.035, 0.6, 2.0, calorie_sensitive=True),
    ScaleSpec("shoulder_width", 0.02, 0.8, 1.6),
    ScaleSpec("hip_width", 0.035, 0.7, 2.0, calorie_sensitive=True),
    ScaleSpec("torso_depth", 0.03, 0.6, 1.8, calorie_sensitive=True),
    ScaleSpec("neck_thickness", 0.025, 0.8, 1.6),
    ScaleSpec("head_scale", 0.005, 0.9, 1.15),
)

GENDER_PRESETS: Mapping[Gender, GenderPreset] = MappingProxyType(
    {
        Gender.MALE: GenderPreset(
            MappingProxyType(
                {
                    "shoulder_width": 1.1,
                    "hip_width": 0.95,
                    "neck_thickness": 1.05,
                }
            )
        ),
        Gender.FEMALE: GenderPreset(
            MappingProxyType(
                {
                    "shoulder_width": 0.92,
                    "hip_width": 1.1,
                    "limb_width": 0.95,
                    "neck_thickness": 0.9,
                    "head_scale": 0.97,
                }
            )
        ),
    }
)


def bmi_category(bmi: float) -> BmiCategory | None:
    """Return the BMI bucket; a value on a breakpoint belongs to the higher one."""
    if math.isnan(bmi):
        return None
    for upper_bound, category in _CATEGORY_BREAKPOINTS:
        if bmi < upper_bound:
            return category
    return BmiCategory.OBESE


def category_color(category: BmiCategory | None) -> str:
    """Return the display color for a BMI bucket."""
    if category is None:
        return NEUTRAL_COLOR
    return CATEGORY_COLORS[category]


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper], passing NaN through."""
    if math.isnan(value):
        return value
    return max(lower, min(upper, value))


def calorie_effect(net_calories: float) -> float:
    """Short-term width shift from a calorie surplus or deficit."""
    return clamp(
        net_calories / CALORIES_PER_KG_SHIFT, -MAX_CALORIE_EFFECT, MAX_CALORIE_EFFECT
    )


def scale_factors(
    bmi: float, net_calories: float, gender: Gender | str
) -> BodyScaleResult:
    """Return bounded mesh scale factors for a body of the given BMI."""
    preset = GENDER_PRESETS[Gender(gender)]
    bmi_diff = bmi - REFERENCE_BMI
    effect = calorie_effect(net_calories)
    factors: dict[str, float] = {}
    for spec in SCALE_SPECS:
        value = (1 + bmi_diff * spec.bmi_coefficient) * preset.multiplier(spec.name)
        if spec.calorie_sensitive:
            value += effect
        factors[spec.name] = clamp(value, spec.min_value, spec.max_value)
    return BodyScaleResult(**factors, color_category=bmi_category(bmi))
