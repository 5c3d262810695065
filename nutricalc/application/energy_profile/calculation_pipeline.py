"""CalculationPipeline - coordinates the energy calculation chain."""

import math
from typing import NoReturn, Optional

import structlog

from nutricalc.domain.energy_profile.calculation.bmr_service import BMRService
from nutricalc.domain.energy_profile.calculation.goal_service import GoalService
from nutricalc.domain.energy_profile.calculation.macro_service import MacroService
from nutricalc.domain.energy_profile.calculation.rounding import round_half_up
from nutricalc.domain.energy_profile.calculation.tdee_service import TDEEService
from nutricalc.domain.energy_profile.calculation.unit_converter import (
    UnitConverter,
)
from nutricalc.domain.energy_profile.core.exceptions.domain_errors import (
    ImplausibleResultError,
    ValidationError,
)
from nutricalc.domain.energy_profile.core.ports.calculators import (
    IBMRCalculator,
    IGoalAdjuster,
    IMacroCalculator,
    ITDEECalculator,
    IUnitConverter,
)
from nutricalc.domain.energy_profile.core.value_objects.bmr import (
    BmrFormula,
    BmrResult,
)
from nutricalc.domain.energy_profile.core.value_objects.calculation_result import (  # noqa: E501
    CalculationResult,
)
from nutricalc.domain.energy_profile.core.value_objects.sex import Sex
from nutricalc.domain.energy_profile.core.value_objects.user_input import (
    NormalizedInput,
    RawInput,
)

logger = structlog.get_logger(__name__)

# Rounded BMR at or below this is rejected as implausible
BMR_FLOOR = 500


class CalculationPipeline:
    """
    Orchestrates calculation services for energy targets.

    Flow:
    1. Validate raw input
    2. Normalize weight/height to metric
    3. Calculate BMR (Katch-McArdle when body fat is usable,
       otherwise Mifflin-St Jeor) and check the sanity floor
    4. Calculate TDEE from BMR and activity level
    5. Apply goal adjustment to get target calories
    6. Split target calories into macronutrients

    The pipeline keeps no per-call state, so one instance can be shared.
    """

    def __init__(
        self,
        unit_converter: Optional[IUnitConverter] = None,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        goal_service: Optional[IGoalAdjuster] = None,
        macro_service: Optional[IMacroCalculator] = None,
    ):
        self._unit_converter = unit_converter or UnitConverter()
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._goal_service = goal_service or GoalService()
        self._macro_service = macro_service or MacroService()

    def compute(self, raw_input: RawInput) -> CalculationResult:
        """
        Calculate energy targets for one input record.

        Args:
            raw_input: Form input (metric or imperial)

        Returns:
            CalculationResult with all metrics rounded to integers

        Raises:
            ValidationError: If a required input is missing or invalid
            ImplausibleResultError: If the rounded BMR is <= 500 kcal/day
        """
        logger.debug(
            "Computing energy targets",
            unit_system=raw_input.unit_system.value,
            activity_level=raw_input.activity_level,
            goal=raw_input.goal,
        )

        # Step 1: Validate before doing any work
        sex = self.validate(raw_input)

        # Step 2: Normalize to metric
        data = self.normalize(raw_input, sex)

        # Step 3: BMR with formula selection, then sanity floor
        bmr_result = self.select_bmr(data)
        bmr = round_half_up(bmr_result.value)
        if bmr <= BMR_FLOOR:
            logger.warning(
                "Implausible BMR",
                bmr=bmr,
                formula=bmr_result.formula.value,
                floor=BMR_FLOOR,
            )
            raise ImplausibleResultError(
                bmr=bmr, formula=bmr_result.formula.value, floor=BMR_FLOOR
            )

        # Step 4: TDEE
        tdee = self._tdee_service.calculate(bmr, data.activity_level)

        # Step 5: Goal calories
        goal_calories = self._goal_service.adjust(tdee, data.goal)

        # Step 6: Macro split
        macros = self._macro_service.allocate(goal_calories, data.goal)

        result = CalculationResult(
            bmr=bmr,
            formula_used=bmr_result.formula,
            tdee=tdee,
            goal_label=self._goal_service.label(data.goal),
            goal_calories=round_half_up(goal_calories),
            macros=macros,
        )

        logger.info(
            "Energy targets computed",
            bmr=result.bmr,
            formula=result.formula_used.value,
            tdee=result.tdee,
            goal_calories=result.goal_calories,
            macros=str(result.macros),
        )
        return result

    def validate(self, raw_input: RawInput) -> Sex:
        """
        Check required inputs.

        Returns:
            The resolved sex

        Raises:
            ValidationError: On the first invalid field
        """
        for field, value in (
            ("weight", raw_input.weight_value),
            ("height", raw_input.height_value),
            ("age", raw_input.age),
        ):
            if value is None or not math.isfinite(value) or value <= 0:
                self._reject(
                    field,
                    f"{field.capitalize()} must be a positive number, got {value!r}",
                )

        sex = Sex.from_code(raw_input.sex)
        if sex is None:
            self._reject("sex", f"Sex must be 'M' or 'F', got {raw_input.sex!r}")

        if not raw_input.activity_level or not raw_input.activity_level.strip():
            self._reject("activity_level", "Activity level is required")

        if not raw_input.goal or not raw_input.goal.strip():
            self._reject("goal", "Goal is required")

        return sex

    def normalize(self, raw_input: RawInput, sex: Sex) -> NormalizedInput:
        """Build metric input from validated raw input."""
        weight_kg, height_cm = self._unit_converter.normalize(
            raw_input.weight_value,
            raw_input.height_value,
            raw_input.unit_system,
        )
        return NormalizedInput(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=raw_input.age,
            sex=sex,
            activity_level=raw_input.activity_level,
            goal=raw_input.goal,
            body_fat_percent=raw_input.body_fat_percent,
        )

    def select_bmr(self, data: NormalizedInput) -> BmrResult:
        """
        Pick the BMR formula.

        Katch-McArdle is tried first when body fat is in (0, 60). A
        missing or non-positive Katch-McArdle value falls back to
        Mifflin-St Jeor and is labelled as a fallback.

        Returns:
            BmrResult with the unrounded value and the formula used
        """
        if not data.has_usable_body_fat():
            return self._selected(
                BmrResult(
                    value=self._bmr_service.mifflin_st_jeor(data),
                    formula=BmrFormula.MIFFLIN,
                )
            )

        katch = self._bmr_service.katch_mcardle(data)
        if katch is not None and katch > 0:
            return self._selected(BmrResult(value=katch, formula=BmrFormula.KATCH))

        logger.warning(
            "Katch-McArdle unusable, falling back to Mifflin-St Jeor",
            body_fat_percent=data.body_fat_percent,
            katch_value=katch,
        )
        return self._selected(
            BmrResult(
                value=self._bmr_service.mifflin_st_jeor(data),
                formula=BmrFormula.KATCH_FALLBACK_MIFFLIN,
            )
        )

    @staticmethod
    def _selected(result: BmrResult) -> BmrResult:
        logger.info(
            "BMR formula selected", formula=result.formula.value, bmr=str(result)
        )
        return result

    @staticmethod
    def _reject(field: str, reason: str) -> NoReturn:
        logger.info("Input rejected", field=field, reason=reason)
        raise ValidationError(reason, field=field)
