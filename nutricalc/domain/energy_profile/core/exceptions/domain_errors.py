"""Domain exceptions for energy profile calculation."""

from typing import Optional


class EnergyProfileDomainError(Exception):
    """Base exception for energy profile domain errors."""

    pass


class ValidationError(EnergyProfileDomainError):
    """Raised when a required input is missing, non-finite or non-positive.

    Example:
        >>> raise ValidationError("Age must be positive, got 0")
    """

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field


class ImplausibleResultError(EnergyProfileDomainError):
    """Raised when the rounded BMR falls at or below the sanity floor."""

    def __init__(self, bmr: int, formula: str, floor: int):
        super().__init__(
            f"Calculated BMR is too low ({bmr} kcal/day <= {floor}). "
            "Check the entered data."
        )
        self.bmr = bmr
        self.formula = formula
        self.floor = floor
