"""Display formatting for percentages and currency amounts.

One convention everywhere: round half-up to two decimal places, then drop
the fraction when the rounded value is a whole number (``20%``, ``$500``),
otherwise show exactly two decimals (``66.67%``, ``$1,234.50``).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from tacos_calculator.engine.result import DerivedMetrics, DisplayStrings

DEFAULT_CURRENCY_SYMBOL = "$"
NOT_AVAILABLE = "—"

_CENT = Decimal("0.01")
# Wide enough for any finite double quantized to cents.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _round(value: float) -> Decimal:
    # Rounds the shortest repr of the float: 0.125 -> 0.13.
    rounded = Decimal(repr(value)).quantize(_CENT, context=_CONTEXT)
    if rounded == 0:
        return Decimal("0.00")
    return rounded


def _render(rounded: Decimal, grouped: bool) -> str:
    magnitude = abs(rounded)
    if magnitude == magnitude.to_integral_value():
        whole = int(magnitude)
        return f"{whole:,}" if grouped else f"{whole}"
    return f"{magnitude:,.2f}" if grouped else f"{magnitude:.2f}"


def format_number(value: float) -> str:
    """Render a plain number under the rounding convention, without grouping."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    rounded = _round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{_render(rounded, grouped=False)}"


def format_percent(value: float) -> str:
    """20.0 -> '20%', 66.6666 -> '66.67%'"""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{format_number(value)}%"


def format_currency(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """11013 -> '$11,013', -1234.5 -> '-$1,234.50'"""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    rounded = _round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{_render(rounded, grouped=True)}"


def format_metrics(
    metrics: DerivedMetrics, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> DisplayStrings:
    """Render every metric in a DerivedMetrics."""
    organic_sales = format_currency(metrics.organic_sales, currency_symbol)
    organic_percent = format_percent(metrics.organic_percent)
    return DisplayStrings(
        tacos=format_percent(metrics.tacos),
        acos=format_percent(metrics.acos),
        organic_sales=organic_sales,
        organic_percent=organic_percent,
        organic_summary=f"{organic_sales} ({organic_percent} of total sales)",
    )
