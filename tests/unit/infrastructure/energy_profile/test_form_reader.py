"""Unit tests for the form reader."""

import pydantic
import pytest

from nutricalc.domain.energy_profile.core.exceptions.domain_errors import (
    ValidationError,
)
from nutricalc.domain.energy_profile.core.value_objects import RawInput, UnitSystem
from nutricalc.infrastructure.energy_profile.form_reader import FormInput, read_form


class TestReadForm:
    """Test reading raw form fields into RawInput."""

    def test_reads_string_fields(self, form_fields):
        """Test typical string input."""
        raw = read_form(form_fields)

        assert raw == RawInput(
            weight_value=70.0,
            height_value=175.0,
            age=30,
            sex="M",
            activity_level="SEDENTARY",
            goal="MAINTENANCE",
            body_fat_percent=None,
            unit_system=UnitSystem.METRIC,
        )

    def test_accepts_numbers(self, form_fields):
        """Test numeric values pass through."""
        form_fields.update(weight=82.5, height=180, age=41)

        raw = read_form(form_fields)

        assert (raw.weight_value, raw.height_value, raw.age) == (82.5, 180.0, 41)

    def test_unit_system_any_case(self, form_fields):
        """Test unit system ignores case."""
        form_fields["unit_system"] = "IMPERIAL"

        assert read_form(form_fields).unit_system is UnitSystem.IMPERIAL

    def test_unknown_unit_system_rejected(self, form_fields):
        """Test unsupported unit system."""
        form_fields["unit_system"] = "furlongs"

        with pytest.raises(ValidationError) as exc_info:
            read_form(form_fields)

        assert exc_info.value.field == "unit_system"

    def test_missing_unit_system_uses_config(self, form_fields, monkeypatch):
        """Test default unit system comes from the environment."""
        monkeypatch.setenv("NUTRICALC_DEFAULT_UNIT_SYSTEM", "imperial")
        del form_fields["unit_system"]

        assert read_form(form_fields).unit_system is UnitSystem.IMPERIAL

    @pytest.mark.parametrize("field", ["weight", "height", "age"])
    def test_blank_required_field(self, form_fields, field):
        """Test blank numeric fields are reported as missing."""
        form_fields[field] = "  "

        with pytest.raises(ValidationError, match="required") as exc_info:
            read_form(form_fields)

        assert exc_info.value.field == field

    def test_non_numeric_weight(self, form_fields):
        """Test unparseable numbers raise the domain ValidationError."""
        form_fields["weight"] = "seventy"

        with pytest.raises(ValidationError) as exc_info:
            read_form(form_fields)

        assert exc_info.value.field == "weight"
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)

    @pytest.mark.parametrize("value", ["", "   ", "n/a", None])
    def test_body_fat_not_provided(self, form_fields, value):
        """Test blank or non-numeric body fat is ignored."""
        form_fields["body_fat"] = value

        assert read_form(form_fields).body_fat_percent is None

    def test_body_fat_parsed(self, form_fields):
        """Test body fat string is parsed."""
        form_fields["body_fat"] = "22.5"

        assert read_form(form_fields).body_fat_percent == 22.5

    def test_whitespace_stripped(self, form_fields):
        """Test text fields are stripped."""
        form_fields.update(sex=" f ", goal=" mild_loss ")

        raw = read_form(form_fields)

        assert raw.sex == "f"
        assert raw.goal == "mild_loss"

    def test_form_input_is_frozen(self, form_fields):
        """Test FormInput cannot be modified."""
        form = FormInput.model_validate(form_fields)

        with pytest.raises(pydantic.ValidationError):
            form.weight = 1.0  # type: ignore[misc]
