"""Metric calculation engine.

Takes three raw field strings -> validates -> derives metrics -> formats them,
returning an EvaluationResult. Bad input never raises; it comes back as an
error result carrying a ValidationErrorKind.
"""

from __future__ import annotations

import logging

# Ensure all formulas are registered on import
import tacos_calculator.metric_library.formulas  # noqa: F401
from tacos_calculator.engine.formatter import DEFAULT_CURRENCY_SYMBOL, format_metrics
from tacos_calculator.engine.result import DerivedMetrics, EvaluationResult
from tacos_calculator.engine.validator import validate
from tacos_calculator.metric_library.registry import METRICS
from tacos_calculator.models.inputs import ParsedInputs, ValidationOutcome

logger = logging.getLogger(__name__)


class MetricCalculator:
    """Stateless engine that evaluates advertising metrics."""

    def __init__(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
        self.currency_symbol = currency_symbol

    def evaluate(self, ad_spend: str, ad_sales: str, total_sales: str) -> EvaluationResult:
        """Run validation, calculation and formatting for one set of fields."""
        outcome = validate(ad_spend, ad_sales, total_sales)
        if not outcome.is_valid:
            logger.debug("Evaluation rejected: %s", outcome.reason.value)
            return EvaluationResult.error(outcome.reason)

        metrics = self.calculate(outcome)
        display = format_metrics(metrics, self.currency_symbol)
        return EvaluationResult.ok(metrics=metrics, display=display)

    def calculate(self, outcome: ValidationOutcome) -> DerivedMetrics:
        """Derive every registered metric from a Valid outcome."""
        if not outcome.is_valid:
            raise ValueError(f"cannot calculate metrics for invalid input: {outcome.reason.value}")
        return calculate_metrics(outcome.inputs)


def calculate_metrics(inputs: ParsedInputs) -> DerivedMetrics:
    """Apply each metric formula to already-validated inputs."""
    return DerivedMetrics(**{definition.id: definition.compute(inputs) for definition in METRICS})


_default_calculator = MetricCalculator()


def evaluate(ad_spend: str, ad_sales: str, total_sales: str) -> EvaluationResult:
    """Evaluate three raw field strings with the default currency symbol."""
    return _default_calculator.evaluate(ad_spend, ad_sales, total_sales)
