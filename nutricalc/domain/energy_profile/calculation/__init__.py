"""Calculation services for energy profile."""

from .bmr_service import BMRService
from .goal_service import GoalService
from .macro_service import MacroService
from .tdee_service import TDEEService
from .unit_converter import UnitConverter

__all__ = [
    "UnitConverter",
    "BMRService",
    "TDEEService",
    "GoalService",
    "MacroService",
]
