"""Shared test fixtures for the TACoS calculator test suite."""

import pytest

from tacos_calculator.engine.calculator import MetricCalculator
from tacos_calculator.models.inputs import ParsedInputs


@pytest.fixture
def calculator() -> MetricCalculator:
    return MetricCalculator()


@pytest.fixture
def reference_inputs() -> ParsedInputs:
    """The worked example shown under the calculator: $500 / $2,000 / $2,500."""
    return ParsedInputs(ad_spend=500.0, ad_sales=2000.0, total_sales=2500.0)


@pytest.fixture
def valid_triples() -> list[tuple[float, float, float]]:
    """(ad_spend, ad_sales, total_sales) spread across the valid domain."""
    return [
        (0.0, 1.0, 1.0),
        (500.0, 2000.0, 2500.0),
        (1.0, 3.0, 7.0),
        (123.45, 678.9, 1000.01),
        (0.01, 0.02, 0.03),
        (99_999.99, 250_000.0, 1_000_000.0),
        (7.0, 10.0, 10.0),
        (3_000.0, 100.0, 100_000.0),
    ]
