"""Value objects for energy profile domain."""

from .activity_level import ActivityLevel
from .bmr import BmrFormula, BmrResult
from .calculation_result import CalculationResult
from .goal import Goal
from .macro_split import MacroRatio, MacroSplit
from .sex import Sex
from .unit_system import UnitSystem
from .user_input import NormalizedInput, RawInput

__all__ = [
    "ActivityLevel",
    "BmrFormula",
    "BmrResult",
    "CalculationResult",
    "Goal",
    "MacroRatio",
    "MacroSplit",
    "NormalizedInput",
    "RawInput",
    "Sex",
    "UnitSystem",
]
