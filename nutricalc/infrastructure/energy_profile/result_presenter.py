"""
Result presenter.

Display strings for a CalculationResult, unit labels for the form and
user-facing failure messages. Numbers are plain integers; locale
formatting belongs to the page that shows them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from nutricalc.domain.energy_profile.core.exceptions.domain_errors import (
    EnergyProfileDomainError,
    ValidationError,
)
from nutricalc.domain.energy_profile.core.value_objects.calculation_result import (  # noqa: E501
    CalculationResult,
)
from nutricalc.domain.energy_profile.core.value_objects.unit_system import (
    UnitSystem,
)

PLACEHOLDER = "..."

VALIDATION_MESSAGE = (
    "Please fill in all required fields: Weight, Height, Age, Sex, "
    "Activity Level and Goal, with positive values."
)


class UnitLabels(BaseModel):
    """Form labels for the weight and height fields."""

    model_config = ConfigDict(frozen=True)

    weight: str
    height: str


class ResultView(BaseModel):
    """Display-ready result panel."""

    model_config = ConfigDict(frozen=True)

    visible: bool
    formula: str
    bmr: str
    tdee: str
    goal_label: str
    goal_calories: str
    macro_heading: str
    protein_grams: str
    carbs_grams: str
    fat_grams: str
    protein_heading: str
    carbs_heading: str
    fat_heading: str
    total_kcal: str

    @classmethod
    def placeholder(cls) -> ResultView:
        """Cleared panel shown before and between calculations."""
        return cls(
            visible=False,
            formula=PLACEHOLDER,
            bmr=PLACEHOLDER,
            tdee=PLACEHOLDER,
            goal_label=PLACEHOLDER,
            goal_calories=PLACEHOLDER,
            macro_heading=PLACEHOLDER,
            protein_grams=PLACEHOLDER,
            carbs_grams=PLACEHOLDER,
            fat_grams=PLACEHOLDER,
            protein_heading=PLACEHOLDER,
            carbs_heading=PLACEHOLDER,
            fat_heading=PLACEHOLDER,
            total_kcal=PLACEHOLDER,
        )


def unit_labels(unit_system: UnitSystem) -> UnitLabels:
    """Labels matching the selected unit system."""
    if unit_system is UnitSystem.IMPERIAL:
        return UnitLabels(weight="Weight (lb):", height="Height (in):")
    return UnitLabels(weight="Weight (kg):", height="Height (cm):")


def present(result: CalculationResult) -> ResultView:
    """
    Render a CalculationResult as display strings.

    Example:
        >>> view = present(result)
        >>> view.protein_heading
        'Protein (30%)'
    """
    macros = result.macros
    return ResultView(
        visible=True,
        formula=f"({result.formula_label})",
        bmr=str(result.bmr),
        tdee=str(result.tdee),
        goal_label=result.goal_label,
        goal_calories=str(result.goal_calories),
        macro_heading=f"Macronutrient Distribution ({macros.proportion_label})",
        protein_grams=str(macros.protein_g),
        carbs_grams=str(macros.carbs_g),
        fat_grams=str(macros.fat_g),
        protein_heading=f"Protein ({macros.protein_pct}%)",
        carbs_heading=f"Carbohydrates ({macros.carbs_pct}%)",
        fat_heading=f"Fat ({macros.fat_pct}%)",
        total_kcal=f"{macros.total_kcal} kcal",
    )


def failure_message(error: EnergyProfileDomainError) -> str:
    """User-facing message for a failed calculation."""
    if isinstance(error, ValidationError):
        return VALIDATION_MESSAGE
    return f"Calculation failed. Check the entered data. Detail: {error}"
