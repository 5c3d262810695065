"""Energy profile application services."""

from .calculation_pipeline import CalculationPipeline

__all__ = ["CalculationPipeline"]
