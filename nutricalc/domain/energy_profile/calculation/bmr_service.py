"""BMRService - Basal Metabolic Rate calculation."""

from typing import Optional

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.user_input import NormalizedInput


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate.

    Mifflin-St Jeor works from weight, height, age and sex:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    Katch-McArdle works from lean body mass and needs body fat %:
        LBM = weight(kg) × (1 - body_fat / 100)
        BMR = 370 + 21.6 × LBM

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.

        McArdle WD, Katch FI, Katch VL. Exercise Physiology: Energy,
        Nutrition, and Human Performance.
    """

    def mifflin_st_jeor(self, data: NormalizedInput) -> float:
        """Calculate BMR with Mifflin-St Jeor.

        Example:
            >>> data = NormalizedInput(
            ...     weight_kg=70.0, height_cm=175.0, age=30, sex=Sex.MALE,
            ...     activity_level="SEDENTARY", goal="MAINTENANCE",
            ... )
            >>> BMRService().mifflin_st_jeor(data)
            1648.75
        """
        base = 10 * data.weight_kg + 6.25 * data.height_cm - 5 * data.age
        return base + data.sex.mifflin_constant()

    def katch_mcardle(self, data: NormalizedInput) -> Optional[float]:
        """Calculate BMR with Katch-McArdle.

        Returns:
            BMR in kcal/day, or None unless 0 < body fat < 60
        """
        body_fat = data.body_fat_percent
        if body_fat is None or not data.has_usable_body_fat():
            return None

        lean_mass = data.weight_kg * (1 - body_fat / 100)
        return 370 + 21.6 * lean_mass
