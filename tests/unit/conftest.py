"""Unit test configuration.

Shared fixtures for the energy profile tests.
"""

import pytest
import structlog

from nutricalc.domain.energy_profile.core.value_objects import RawInput, UnitSystem
from nutricalc.infrastructure.energy_profile.pipeline_factory import (
    reset_calculation_pipeline,
)


@pytest.fixture(autouse=True)
def clean_state():
    """Reset pipeline singleton and structlog configuration around each test."""
    reset_calculation_pipeline()
    yield
    reset_calculation_pipeline()
    structlog.reset_defaults()


@pytest.fixture
def metric_input() -> RawInput:
    """70 kg, 175 cm, 30 y male, sedentary, maintenance."""
    return RawInput(
        weight_value=70.0,
        height_value=175.0,
        age=30,
        sex="M",
        activity_level="SEDENTARY",
        goal="MAINTENANCE",
        unit_system=UnitSystem.METRIC,
    )


@pytest.fixture
def form_fields() -> dict:
    """Form fields as typed into the page."""
    return {
        "unit_system": "metric",
        "weight": "70",
        "height": "175",
        "age": "30",
        "sex": "M",
        "body_fat": "",
        "activity_level": "SEDENTARY",
        "goal": "MAINTENANCE",
    }
