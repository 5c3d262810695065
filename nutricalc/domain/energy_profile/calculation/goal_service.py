"""GoalService - goal-based calorie adjustment."""

from ..core.ports.calculators import IGoalAdjuster
from ..core.value_objects.goal import (
    DEFAULT_GOAL_OFFSET,
    UNDEFINED_GOAL_LABEL,
    Goal,
)


class GoalService(IGoalAdjuster):
    """Shift TDEE by a fixed calorie offset for the stated goal.

    Unrecognized goal codes mean maintenance (offset 0) and are labelled
    "Goal Not Defined".
    """

    def offset(self, goal: str) -> int:
        resolved = Goal.from_code(goal)
        if resolved is None:
            return DEFAULT_GOAL_OFFSET
        return resolved.calorie_offset()

    def adjust(self, tdee: float, goal: str) -> float:
        """Apply calorie offset to TDEE. No rounding.

        Example:
            >>> GoalService().adjust(2556, "mild_gain")
            2856
        """
        return tdee + self.offset(goal)

    def label(self, goal: str) -> str:
        resolved = Goal.from_code(goal)
        if resolved is None:
            return UNDEFINED_GOAL_LABEL
        return resolved.label()
