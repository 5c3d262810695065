"""UnitConverter - imperial to metric normalization."""

from typing import Tuple

from ..core.ports.calculators import IUnitConverter
from ..core.value_objects.unit_system import UnitSystem

POUNDS_PER_KG = 2.20462
INCHES_PER_CM = 0.393701


def pounds_to_kg(pounds: float) -> float:
    return pounds / POUNDS_PER_KG


def kg_to_pounds(kg: float) -> float:
    return kg * POUNDS_PER_KG


def inches_to_cm(inches: float) -> float:
    return inches / INCHES_PER_CM


def cm_to_inches(cm: float) -> float:
    return cm * INCHES_PER_CM


class UnitConverter(IUnitConverter):
    """Normalize weight and height to kilograms and centimeters.

    Metric input passes through unchanged. Imperial input is converted
    with 2.20462 lb/kg and 0.393701 in/cm.
    """

    def normalize(
        self,
        weight_value: float,
        height_value: float,
        unit_system: UnitSystem,
    ) -> Tuple[float, float]:
        """Convert weight and height to metric.

        Example:
            >>> UnitConverter().normalize(70.0, 175.0, UnitSystem.METRIC)
            (70.0, 175.0)
        """
        if unit_system is UnitSystem.IMPERIAL:
            return pounds_to_kg(weight_value), inches_to_cm(height_value)
        return weight_value, height_value
