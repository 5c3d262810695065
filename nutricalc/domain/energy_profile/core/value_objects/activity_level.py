"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - INTENSE: Hard exercise 6-7 days/week
    - VERY_INTENSE: Very hard exercise + physical job
    """

    SEDENTARY = "SEDENTARY"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    INTENSE = "INTENSE"
    VERY_INTENSE = "VERY_INTENSE"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["ActivityLevel"]:
        """Resolve a free-text activity code, ignoring case.

        Returns:
            ActivityLevel or None when the code is not recognized

        Example:
            >>> ActivityLevel.from_code("moderate")
            <ActivityLevel.MODERATE: 'MODERATE'>
            >>> ActivityLevel.from_code("couch") is None
            True
        """
        if not code:
            return None
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return PAL_MULTIPLIERS[self]


PAL_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,  # Minimal activity
        ActivityLevel.LIGHT: 1.375,  # Light exercise
        ActivityLevel.MODERATE: 1.55,  # Moderate exercise
        ActivityLevel.INTENSE: 1.725,  # Hard exercise
        ActivityLevel.VERY_INTENSE: 1.9,  # Very hard exercise
    }
)

# Unrecognized activity codes are treated as sedentary
DEFAULT_ACTIVITY_LEVEL = ActivityLevel.SEDENTARY
