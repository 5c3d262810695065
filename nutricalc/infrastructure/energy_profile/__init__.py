"""Boundary adapters for the energy profile calculator."""

from nutricalc.infrastructure.energy_profile.form_reader import FormInput, read_form
from nutricalc.infrastructure.energy_profile.pipeline_factory import (
    calculate_from_form,
    create_calculation_pipeline,
    get_calculation_pipeline,
    reset_calculation_pipeline,
)
from nutricalc.infrastructure.energy_profile.result_presenter import (
    ResultView,
    UnitLabels,
    failure_message,
    present,
    unit_labels,
)

__all__ = [
    "FormInput",
    "read_form",
    "calculate_from_form",
    "create_calculation_pipeline",
    "get_calculation_pipeline",
    "reset_calculation_pipeline",
    "ResultView",
    "UnitLabels",
    "present",
    "unit_labels",
    "failure_message",
]
