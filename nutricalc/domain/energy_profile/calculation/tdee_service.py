"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import (
    DEFAULT_ACTIVITY_LEVEL,
    ActivityLevel,
)
from .rounding import round_half_up


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Intense: 1.725 (hard exercise 6-7 days/week)
        - Very Intense: 1.9 (very hard exercise + physical job)

    Unrecognized activity codes use the sedentary multiplier.
    """

    def multiplier(self, activity_level: str) -> float:
        """Get PAL multiplier for a free-text activity code.

        Example:
            >>> TDEEService().multiplier("light")
            1.375
            >>> TDEEService().multiplier("unknown_value")
            1.2
        """
        level = ActivityLevel.from_code(activity_level) or DEFAULT_ACTIVITY_LEVEL
        return level.pal_multiplier()

    def calculate(self, bmr: int, activity_level: str) -> int:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate (kcal/day)
            activity_level: Activity code, any case

        Returns:
            int: TDEE in kcal/day, rounded

        Example:
            >>> TDEEService().calculate(1649, "MODERATE")
            2556
        """
        return round_half_up(bmr * self.multiplier(activity_level))
