"""Goal value object - user's nutritional objective."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .macro_split import MacroRatio


class Goal(str, Enum):
    """User's nutritional goal determining calorie adjustment.

    - MAINTENANCE: Weight maintenance at TDEE
    - MILD_LOSS / MODERATE_LOSS: Calorie deficit (-300 / -500 kcal/day)
    - MILD_GAIN / MODERATE_GAIN: Calorie surplus (+300 / +500 kcal/day)
    """

    MAINTENANCE = "MAINTENANCE"
    MILD_LOSS = "MILD_LOSS"
    MODERATE_LOSS = "MODERATE_LOSS"
    MILD_GAIN = "MILD_GAIN"
    MODERATE_GAIN = "MODERATE_GAIN"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Goal"]:
        """Resolve a free-text goal code, ignoring case.

        Returns:
            Goal or None when the code is not recognized
        """
        if not code:
            return None
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None

    def is_loss(self) -> bool:
        return self in (Goal.MILD_LOSS, Goal.MODERATE_LOSS)

    def is_gain(self) -> bool:
        return self in (Goal.MILD_GAIN, Goal.MODERATE_GAIN)

    def calorie_offset(self) -> int:
        """Get calorie offset applied to TDEE.

        Example:
            >>> Goal.MODERATE_LOSS.calorie_offset()
            -500
        """
        return GOAL_OFFSETS[self]

    def label(self) -> str:
        """Get display label."""
        return GOAL_LABELS[self]

    def macro_ratio(self) -> MacroRatio:
        """Get macro ratio row for this goal class.

        Example:
            >>> Goal.MILD_LOSS.macro_ratio().label()
            '40% Protein / 30% Carb / 30% Fat'
        """
        if self.is_loss():
            return LOSS_RATIO
        if self.is_gain():
            return GAIN_RATIO
        return MAINTENANCE_RATIO


GOAL_OFFSETS: Mapping[Goal, int] = MappingProxyType(
    {
        Goal.MAINTENANCE: 0,
        Goal.MILD_LOSS: -300,
        Goal.MODERATE_LOSS: -500,
        Goal.MILD_GAIN: +300,
        Goal.MODERATE_GAIN: +500,
    }
)

GOAL_LABELS: Mapping[Goal, str] = MappingProxyType(
    {
        Goal.MAINTENANCE: "Weight Maintenance",
        Goal.MILD_LOSS: "Mild Weight Loss",
        Goal.MODERATE_LOSS: "Moderate Weight Loss",
        Goal.MILD_GAIN: "Mild Mass Gain",
        Goal.MODERATE_GAIN: "Moderate Mass Gain",
    }
)

# Defaults for unrecognized goal codes
DEFAULT_GOAL_OFFSET = 0
UNDEFINED_GOAL_LABEL = "Goal Not Defined"

LOSS_RATIO = MacroRatio(protein=0.40, carbs=0.30, fat=0.30)
GAIN_RATIO = MacroRatio(protein=0.30, carbs=0.50, fat=0.20)
MAINTENANCE_RATIO = MacroRatio(protein=0.30, carbs=0.40, fat=0.30)
