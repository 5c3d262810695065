"""Ports for energy profile domain."""

from .calculators import (
    IBMRCalculator,
    IGoalAdjuster,
    IMacroCalculator,
    ITDEECalculator,
    IUnitConverter,
)

__all__ = [
    "IUnitConverter",
    "IBMRCalculator",
    "ITDEECalculator",
    "IGoalAdjuster",
    "IMacroCalculator",
]
