"""
Form reader.

Turns raw form fields (strings as typed by the user, or numbers) into a
RawInput for the calculation pipeline.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from nutricalc.domain.energy_profile.core.exceptions.domain_errors import (
    ValidationError,
)
from nutricalc.domain.energy_profile.core.value_objects.unit_system import (
    UnitSystem,
)
from nutricalc.domain.energy_profile.core.value_objects.user_input import (
    RawInput,
)
from nutricalc.infrastructure.config import get_default_unit_system

logger = structlog.get_logger(__name__)


class FormInput(BaseModel):
    """
    Form fields as submitted.

    Blank strings count as missing. Body fat is optional and lenient: a
    blank or non-numeric value means "not provided".

    Example:
        >>> form = FormInput(weight="70", height="175", age="30", sex="m",
        ...                  activity_level="moderate", goal="maintenance")
        >>> form.to_raw_input().weight_value
        70.0
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    unit_system: UnitSystem = Field(default_factory=get_default_unit_system)
    weight: Optional[float] = Field(None, description="kg or lb")
    height: Optional[float] = Field(None, description="cm or in")
    age: Optional[int] = Field(None, description="Years")
    sex: str = ""
    body_fat: Optional[float] = Field(None, description="Body fat %")
    activity_level: str = ""
    goal: str = ""

    @field_validator("unit_system", mode="before")
    @classmethod
    def parse_unit_system(cls, v: Any) -> UnitSystem:
        """Accept any case; blank means the configured default."""
        if isinstance(v, UnitSystem):
            return v
        if v is None or not str(v).strip():
            return get_default_unit_system()
        resolved = UnitSystem.from_code(str(v))
        if resolved is None:
            raise ValueError(f"Unit system must be 'metric' or 'imperial', got {v!r}")
        return resolved

    @field_validator("weight", "height", "age", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("body_fat", mode="before")
    @classmethod
    def lenient_body_fat(cls, v: Any) -> Optional[float]:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            return float(v)
        except (TypeError, ValueError):
            return None

    def to_raw_input(self) -> RawInput:
        """
        Build pipeline input.

        Raises:
            ValidationError: If weight, height or age is missing
        """
        for name in ("weight", "height", "age"):
            if getattr(self, name) is None:
                raise ValidationError(f"{name.capitalize()} is required", field=name)

        # Checked above; narrows Optional for type checkers
        weight, height, age = self.weight or 0.0, self.height or 0.0, self.age or 0

        return RawInput(
            weight_value=weight,
            height_value=height,
            age=age,
            sex=self.sex,
            activity_level=self.activity_level,
            goal=self.goal,
            body_fat_percent=self.body_fat,
            unit_system=self.unit_system,
        )


def read_form(fields: Mapping[str, Any]) -> RawInput:
    """
    Read form fields into a RawInput.

    Args:
        fields: Field name to submitted value

    Returns:
        RawInput ready for CalculationPipeline.compute

    Raises:
        ValidationError: If a field cannot be parsed or is missing
    """
    try:
        form = FormInput.model_validate(dict(fields))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        logger.info("Form rejected", field=field, error=first["msg"])
        raise ValidationError(
            f"Invalid value for {field}: {first['msg']}", field=field
        ) from exc

    return form.to_raw_input()
