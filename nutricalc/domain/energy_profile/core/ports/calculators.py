"""Calculator ports - interfaces for the energy calculation chain."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..value_objects.macro_split import MacroSplit
from ..value_objects.unit_system import UnitSystem
from ..value_objects.user_input import NormalizedInput


class IUnitConverter(ABC):
    """Port for unit normalization (imperial to metric)."""

    @abstractmethod
    def normalize(
        self,
        weight_value: float,
        height_value: float,
        unit_system: UnitSystem,
    ) -> Tuple[float, float]:
        """Convert weight and height to (kg, cm)."""
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Exposes both formulas; choosing between them is the caller's job.
    """

    @abstractmethod
    def mifflin_st_jeor(self, data: NormalizedInput) -> float:
        """Calculate BMR with Mifflin-St Jeor.

        Args:
            data: Normalized metric input

        Returns:
            float: BMR in kcal/day (unrounded)
        """
        pass

    @abstractmethod
    def katch_mcardle(self, data: NormalizedInput) -> Optional[float]:
        """Calculate BMR with Katch-McArdle.

        Args:
            data: Normalized metric input

        Returns:
            float BMR in kcal/day, or None when body fat is unusable
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: int, activity_level: str) -> int:
        """Calculate rounded TDEE from BMR and an activity code."""
        pass


class IGoalAdjuster(ABC):
    """Port for goal-based calorie adjustment."""

    @abstractmethod
    def adjust(self, tdee: float, goal: str) -> float:
        """Apply the goal's calorie offset to TDEE."""
        pass

    @abstractmethod
    def label(self, goal: str) -> str:
        """Get the goal's display label."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation.

    Calculates protein/carbs/fat split based on goal and calories.
    """

    @abstractmethod
    def allocate(self, goal_calories: float, goal: str) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            goal_calories: Daily calorie target
            goal: Goal code

        Returns:
            MacroSplit: Protein/carbs/fat grams and percentages
        """
        pass
