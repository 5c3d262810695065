"""MacroService - Macronutrient distribution calculation."""

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.goal import MAINTENANCE_RATIO, Goal
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroRatio,
    MacroSplit,
)
from .rounding import round_half_up


class MacroService(IMacroCalculator):
    """Calculate macronutrient distribution based on goal.

    Splits goal calories by a fixed percent row per goal class:

    Loss (mild or moderate):
        - Protein 40% / Carbs 30% / Fat 30%

    Gain (mild or moderate):
        - Protein 30% / Carbs 50% / Fat 20%

    Maintenance (and unrecognized goals):
        - Protein 30% / Carbs 40% / Fat 30%

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g

    Grams and percentages are rounded one field at a time; the drift
    between the rounded parts and the whole is left as is.
    """

    def ratio_for(self, goal: str) -> MacroRatio:
        resolved = Goal.from_code(goal)
        if resolved is None:
            return MAINTENANCE_RATIO
        return resolved.macro_ratio()

    def allocate(self, goal_calories: float, goal: str) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            goal_calories: Daily calorie target
            goal: Goal code, any case

        Returns:
            MacroSplit: Protein/carbs/fat grams and percentages

        Example:
            >>> split = MacroService().allocate(2000.0, "MAINTENANCE")
            >>> split.protein_g, split.carbs_g, split.fat_g
            (150, 200, 67)
            >>> split.total_kcal
            2000
        """
        ratio = self.ratio_for(goal)

        protein_kcal = goal_calories * ratio.protein
        carbs_kcal = goal_calories * ratio.carbs
        fat_kcal = goal_calories * ratio.fat

        # Very low targets must not produce negative grams
        return MacroSplit(
            protein_g=max(0, round_half_up(protein_kcal / PROTEIN_KCAL_PER_G)),
            carbs_g=max(0, round_half_up(carbs_kcal / CARBS_KCAL_PER_G)),
            fat_g=max(0, round_half_up(fat_kcal / FAT_KCAL_PER_G)),
            protein_pct=round_half_up(ratio.protein * 100),
            carbs_pct=round_half_up(ratio.carbs * 100),
            fat_pct=round_half_up(ratio.fat * 100),
            total_kcal=round_half_up(protein_kcal + carbs_kcal + fat_kcal),
            proportion_label=ratio.label(),
        )
