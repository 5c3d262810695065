"""UnitSystem value object - measurement system of raw form input."""

from enum import Enum
from typing import Optional


class UnitSystem(str, Enum):
    """Measurement system used for weight and height input.

    - METRIC: kilograms and centimeters
    - IMPERIAL: pounds and inches
    """

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["UnitSystem"]:
        """Resolve a unit system code, ignoring case and whitespace.

        Returns:
            UnitSystem or None if the code is not recognized
        """
        if code is None:
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None
