from .calculator import MetricCalculator, calculate_metrics, evaluate
from .formatter import format_currency, format_metrics, format_percent
from .result import DerivedMetrics, DisplayStrings, EvaluationResult
from .sanitizer import sanitize
from .validator import parse_amount, validate

__all__ = [
    "DerivedMetrics",
    "DisplayStrings",
    "EvaluationResult",
    "MetricCalculator",
    "calculate_metrics",
    "evaluate",
    "format_currency",
    "format_metrics",
    "format_percent",
    "parse_amount",
    "sanitize",
    "validate",
]
