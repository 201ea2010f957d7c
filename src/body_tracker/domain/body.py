"""Domain models for the body visualization parameters."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class Gender(StrEnum):
    """Body model preset."""

    MALE = "male"
    FEMALE = "female"


class BmiCategory(StrEnum):
    """WHO-style BMI bucket."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class ScaleSpec:
    """How one mesh factor responds to BMI, and the band it is clamped to."""

    name: str
    bmi_coefficient: float
    min_value: float
    max_value: float
    calorie_sensitive: bool = False


@dataclass(frozen=True)
class GenderPreset:
    """Per-factor multipliers applied on top of the BMI response."""

    multipliers: Mapping[str, float]

    def multiplier(self, factor: str) -> float:
        """Return the multiplier for a factor, 1.0 when unset."""
        return self.multipliers.get(factor, 1.0)


@dataclass(frozen=True)
class BodyScaleResult:
    """Mesh scale factors and color bucket consumed by the renderer."""

    torso_width: float
    limb_width: float
    shoulder_width: float
    hip_width: float
    torso_depth: float
    neck_thickness: float
    head_scale: float
    color_category: BmiCategory | None

    def factors(self) -> dict[str, float]:
        """Return the seven scale factors keyed by name."""
        return {
            "torso_width": self.torso_width,
            "limb_width": self.limb_width,
            "shoulder_width": self.shoulder_width,
            "hip_width": self.hip_width,
            "torso_depth": self.torso_depth,
            "neck_thickness": self.neck_thickness,
            "head_scale": self.head_scale,
        }
