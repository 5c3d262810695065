"""Input value objects - raw form input and its metric normalization."""

from dataclasses import dataclass
from typing import Optional

from .sex import Sex
from .unit_system import UnitSystem


@dataclass(frozen=True)
class RawInput:
    """Flat input record as collected from the form.

    Weight and height are in the units of ``unit_system``. Activity level
    and goal are kept as free text: unrecognized codes are not errors and
    resolve to defaults further down the pipeline.

    Attributes:
        weight_value: Body weight (kg or lb)
        height_value: Height (cm or in)
        age: Age in years
        sex: 'M' or 'F' (any case)
        activity_level: Activity code, e.g. 'MODERATE'
        goal: Goal code, e.g. 'MILD_LOSS'
        body_fat_percent: Body fat %, None or 0 when not provided
        unit_system: Measurement system of weight and height
    """

    weight_value: float
    height_value: float
    age: int
    sex: str
    activity_level: str
    goal: str
    body_fat_percent: Optional[float] = None
    unit_system: UnitSystem = UnitSystem.METRIC


@dataclass(frozen=True)
class NormalizedInput:
    """Validated input in metric units.

    Attributes:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        age: Age in years
        sex: Biological sex
        activity_level: Activity code as entered
        goal: Goal code as entered
        body_fat_percent: Body fat % or None
    """

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: str
    goal: str
    body_fat_percent: Optional[float] = None

    def has_usable_body_fat(self) -> bool:
        """Whether body fat allows Katch-McArdle (0 < bf < 60)."""
        bf = self.body_fat_percent
        return bf is not None and 0.0 < bf < 60.0
