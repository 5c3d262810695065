"""Sex value object - biological sex used by Mifflin-St Jeor."""

from enum import Enum
from typing import Optional


class Sex(str, Enum):
    """Biological sex ('M' or 'F')."""

    MALE = "M"
    FEMALE = "F"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Sex"]:
        """Resolve 'M'/'F' case-insensitively.

        Returns:
            Sex or None if the code is empty or not recognized
        """
        if not code:
            return None
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None

    def mifflin_constant(self) -> float:
        """Sex-specific constant of the Mifflin-St Jeor equation.

        Example:
            >>> Sex.FEMALE.mifflin_constant()
            -161.0
        """
        return 5.0 if self is Sex.MALE else -161.0
