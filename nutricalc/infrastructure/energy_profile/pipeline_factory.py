"""Factory for the calculation pipeline."""

from typing import Any, Mapping, Optional

from nutricalc.application.energy_profile.calculation_pipeline import (
    CalculationPipeline,
)
from nutricalc.domain.energy_profile.core.value_objects.calculation_result import (  # noqa: E501
    CalculationResult,
)
from nutricalc.infrastructure.config import load_environment
from nutricalc.infrastructure.energy_profile.form_reader import read_form

# Singleton instance
_calculation_pipeline: Optional[CalculationPipeline] = None


def create_calculation_pipeline() -> CalculationPipeline:
    """
    Create a pipeline wired with the default domain services.

    Returns:
        CalculationPipeline
    """
    return CalculationPipeline()


def get_calculation_pipeline() -> CalculationPipeline:
    """
    Get singleton pipeline instance.

    Lazy initialization on first call, which also loads ./.env into
    the process environment. The pipeline is stateless, so sharing it
    between callers is safe.

    Returns:
        CalculationPipeline singleton
    """
    global _calculation_pipeline
    if _calculation_pipeline is None:
        load_environment()
        _calculation_pipeline = create_calculation_pipeline()
    return _calculation_pipeline


def reset_calculation_pipeline() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _calculation_pipeline
    _calculation_pipeline = None


def calculate_from_form(fields: Mapping[str, Any]) -> CalculationResult:
    """
    Read form fields and compute energy targets.

    Raises:
        ValidationError: If the form is incomplete or invalid
        ImplausibleResultError: If the resulting BMR is implausible
    """
    return get_calculation_pipeline().compute(read_form(fields))
