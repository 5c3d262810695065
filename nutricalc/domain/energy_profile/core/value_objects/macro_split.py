"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

# kcal per gram
PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroRatio:
    """Share of daily calories assigned to each macronutrient.

    Attributes:
        protein: Protein fraction of calories (0.0-1.0)
        carbs: Carbohydrate fraction of calories (0.0-1.0)
        fat: Fat fraction of calories (0.0-1.0)
    """

    protein: float
    carbs: float
    fat: float

    def __post_init__(self) -> None:
        for name in ("protein", "carbs", "fat"):
            if not (0.0 <= getattr(self, name) <= 1.0):
                raise ValueError(
                    f"{name} fraction must be 0-1, got {getattr(self, name)}"
                )

    def label(self) -> str:
        """Proportion label, e.g. '40% Protein / 30% Carb / 30% Fat'."""
        return (
            f"{self.protein * 100:.0f}% Protein / "
            f"{self.carbs * 100:.0f}% Carb / "
            f"{self.fat * 100:.0f}% Fat"
        )


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams and percent of calories.

    Every field is rounded on its own, so the rounded parts may not add
    up exactly to 100% or to total_kcal.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
        protein_pct: Protein percent of calories
        carbs_pct: Carbohydrate percent of calories
        fat_pct: Fat percent of calories
        total_kcal: Rounded sum of the unrounded per-macro calories
        proportion_label: Human-readable ratio of the selected split
    """

    protein_g: int
    carbs_g: int
    fat_g: int
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    total_kcal: int
    proportion_label: str

    def __post_init__(self) -> None:
        """Validate grams and percentages are non-negative.

        Raises:
            ValueError: If any amount is negative
        """
        for name in (
            "protein_g",
            "carbs_g",
            "fat_g",
            "protein_pct",
            "carbs_pct",
            "fat_pct",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def __str__(self) -> str:
        """Macros in P/C/F format."""
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
