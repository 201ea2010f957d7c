"""Tests for body scale mapping."""

import math

import pytest

from body_tracker.domain.body import BmiCategory, Gender
from body_tracker.services.body_scale import (
    GENDER_PRESETS,
    SCALE_SPECS,
    bmi_category,
    calorie_effect,
    category_color,
    scale_factors,
)

_SAMPLED_BMIS = [5 + step * 0.5 for step in range(111)]


@pytest.mark.parametrize(
    ("bmi", "category"),
    [
        (16.0, BmiCategory.UNDERWEIGHT),
        (18.49, BmiCategory.UNDERWEIGHT),
        (18.5, BmiCategory.NORMAL),
        (24.99, BmiCategory.NORMAL),
        (25.0, BmiCategory.OVERWEIGHT),
        (29.9, BmiCategory.OVERWEIGHT),
        (30.0, BmiCategory.OBESE),
        (45.0, BmiCategory.OBESE),
    ],
)
def test_bmi_category_breakpoints(bmi: float, category: BmiCategory) -> None:
    assert bmi_category(bmi) is category


def test_bmi_category_nan_has_no_bucket() -> None:
    assert bmi_category(math.nan) is None
    assert category_color(None) == "#FFD8B1"


def test_category_colors() -> None:
    assert category_color(BmiCategory.NORMAL) == "#66BB6A"
    assert category_color(BmiCategory.OBESE) == "#EF5350"
    assert category_color(BmiCategory.UNDERWEIGHT) == "#FFA726"


@pytest.mark.parametrize("gender", list(Gender))
@pytest.mark.parametrize("net", [-10000, 0, 10000])
def test_scale_factors_stay_within_bands(gender: Gender, net: float) -> None:
    for bmi in _SAMPLED_BMIS:
        factors = scale_factors(bmi, net, gender).factors()
        for spec in SCALE_SPECS:
            assert spec.min_value <= factors[spec.name] <= spec.max_value


@pytest.mark.parametrize("gender", list(Gender))
def test_scale_factors_non_decreasing_in_bmi(gender: Gender) -> None:
    previous = scale_factors(_SAMPLED_BMIS[0], 0, gender).factors()
    for bmi in _SAMPLED_BMIS[1:]:
        current = scale_factors(bmi, 0, gender).factors()
        for name, value in current.items():
            assert value >= previous[name]
        previous = current


def test_scale_factors_deterministic() -> None:
    first = scale_factors(27.3, 420, "female")
    second = scale_factors(27.3, 420, "female")
    assert first == second


def test_scale_factors_reference_bmi_is_neutral_torso() -> None:
    result = scale_factors(22, 0, Gender.MALE)
    assert result.torso_width == pytest.approx(1.0)
    assert result.torso_depth == pytest.approx(1.0)
    assert result.color_category is BmiCategory.NORMAL


def test_gender_presets_shape_shoulders_and_hips() -> None:
    male = scale_factors(22, 0, Gender.MALE)
    female = scale_factors(22, 0, Gender.FEMALE)
    assert male.shoulder_width > female.shoulder_width
    assert female.hip_width > male.hip_width
    assert set(GENDER_PRESETS) == set(Gender)


def test_calorie_effect_is_capped() -> None:
    assert calorie_effect(350) == pytest.approx(0.1)
    assert calorie_effect(100000) == pytest.approx(0.1)
    assert calorie_effect(-100000) == pytest.approx(-0.1)
    assert calorie_effect(0) == 0


def test_surplus_widens_only_calorie_sensitive_factors() -> None:
    base = scale_factors(24, 0, Gender.MALE)
    surplus = scale_factors(24, 3500, Gender.MALE)
    assert surplus.torso_width == pytest.approx(base.torso_width + 0.1)
    assert surplus.hip_width == pytest.approx(base.hip_width + 0.1)
    assert surplus.shoulder_width == base.shoulder_width
    assert surplus.head_scale == base.head_scale


def test_nan_bmi_propagates() -> None:
    result = scale_factors(math.nan, 0, Gender.MALE)
    assert all(math.isnan(value) for value in result.factors().values())
    assert result.color_category is None


def test_gender_presets_are_read_only() -> None:
    with pytest.raises(TypeError):
        GENDER_PRESETS[Gender.MALE].multipliers["hip_width"] = 3  # type: ignore[index]

    assert GENDER_PRESETS[Gender.MALE].multiplier("hip_width") == 0.95
