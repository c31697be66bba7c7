"""TACoS / ACoS / organic sales calculator engine."""

from tacos_calculator.engine import evaluate, sanitize, validate
from tacos_calculator.session import CalculatorSession

__all__ = ["CalculatorSession", "evaluate", "sanitize", "validate"]

__version__ = "0.1.0"
