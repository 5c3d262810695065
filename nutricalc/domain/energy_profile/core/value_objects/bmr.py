"""BMR value objects - Basal Metabolic Rate and the formula behind it."""

from dataclasses import dataclass
from enum import Enum


class BmrFormula(str, Enum):
    """Formula that produced a BMR value.

    KATCH_FALLBACK_MIFFLIN marks a Katch-McArdle attempt that was
    unusable and replaced by Mifflin-St Jeor.
    """

    MIFFLIN = "MIFFLIN"
    KATCH = "KATCH"
    KATCH_FALLBACK_MIFFLIN = "KATCH_FALLBACK_MIFFLIN"

    def label(self) -> str:
        """Get display label.

        Example:
            >>> BmrFormula.MIFFLIN.label()
            'Mifflin-St Jeor'
        """
        labels = {
            BmrFormula.MIFFLIN: "Mifflin-St Jeor",
            BmrFormula.KATCH: "Katch-McArdle - Lean Body Mass",
            BmrFormula.KATCH_FALLBACK_MIFFLIN: (
                "Katch-McArdle - Lean Body Mass -> Falling back to Mifflin-St Jeor"
            ),
        }
        return labels[self]


@dataclass(frozen=True)
class BmrResult:
    """Basal Metabolic Rate in kcal/day, tagged with its formula.

    No positivity check here: implausible values are rejected by the
    calculation pipeline after rounding.

    Attributes:
        value: BMR in kcal/day
        formula: Formula that produced the value
    """

    value: float
    formula: BmrFormula

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day ({self.formula.label()})"
