"""Domain exceptions for energy profile."""

from .domain_errors import (
    EnergyProfileDomainError,
    ImplausibleResultError,
    ValidationError,
)

__all__ = [
    "EnergyProfileDomainError",
    "ValidationError",
    "ImplausibleResultError",
]
