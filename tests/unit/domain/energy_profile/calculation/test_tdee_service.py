"""Unit tests for TDEEService."""

import pytest

from nutricalc.domain.energy_profile.calculation.tdee_service import TDEEService


class TestTDEEService:
    """Test TDEE calculation using PAL multipliers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()
        self.base_bmr = 1800

    @pytest.mark.parametrize(
        "activity,expected",
        [
            ("SEDENTARY", 2160),  # 1800 * 1.2
            ("LIGHT", 2475),  # 1800 * 1.375
            ("MODERATE", 2790),  # 1800 * 1.55
            ("INTENSE", 3105),  # 1800 * 1.725
            ("VERY_INTENSE", 3420),  # 1800 * 1.9
        ],
    )
    def test_multiplier_table(self, activity, expected):
        """Test TDEE for each activity level."""
        assert self.service.calculate(self.base_bmr, activity) == expected

    def test_case_insensitive(self):
        """Test activity codes ignore case."""
        assert self.service.calculate(self.base_bmr, "moderate") == 2790
        assert self.service.calculate(self.base_bmr, "Very_Intense") == 3420

    def test_unknown_activity_defaults_to_sedentary(self):
        """Test unrecognized activity uses the 1.2 multiplier."""
        unknown = self.service.calculate(self.base_bmr, "unknown_value")
        sedentary = self.service.calculate(self.base_bmr, "SEDENTARY")

        assert unknown == sedentary == 2160
        assert self.service.multiplier("unknown_value") == 1.2

    def test_result_is_rounded(self):
        """Test TDEE is rounded to the nearest integer."""
        # 1649 * 1.55 = 2555.95
        assert self.service.calculate(1649, "MODERATE") == 2556

    def test_half_rounds_up(self):
        """Test .5 rounds up rather than to even."""
        # 1004 * 1.375 = 1380.5 exactly
        assert self.service.calculate(1004, "LIGHT") == 1381
