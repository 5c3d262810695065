"""CalculationResult value object - aggregate output of the pipeline."""

from dataclasses import dataclass

from .bmr import BmrFormula
from .macro_split import MacroSplit


@dataclass(frozen=True)
class CalculationResult:
    """Energy targets computed from one input record.

    All numbers are rounded to integers, ready for formatting.

    Attributes:
        bmr: Basal metabolic rate (kcal/day)
        formula_used: Formula that produced the BMR
        tdee: Total daily energy expenditure (kcal/day)
        goal_label: Display label of the goal
        goal_calories: Daily calorie target for the goal
        macros: Macronutrient split of goal_calories
    """

    bmr: int
    formula_used: BmrFormula
    tdee: int
    goal_label: str
    goal_calories: int
    macros: MacroSplit

    @property
    def formula_label(self) -> str:
        return self.formula_used.label()
