"""nutricalc - energy expenditure and macronutrient targets."""

__version__ = "1.0.0"
