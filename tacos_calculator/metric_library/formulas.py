"""Advertising metric formulas: TACoS, ACoS and organic sales.

Each function is a pure calculation with no side effects and no rounding.
Monetary inputs share one currency. Percentages are returned on a 0-100
scale.
"""

from tacos_calculator.metric_library.registry import register_metric
from tacos_calculator.models.enums import MetricUnit


@register_metric(
    metric_id="tacos",
    label="TACoS",
    formula="TACoS = ( Total Ad Spend ÷ Total Sales ) × 100",
    required_inputs=["ad_spend", "total_sales"],
)
def calc_tacos(ad_spend: float, total_sales: float) -> float:
    """TACoS = ad_spend / total_sales * 100"""
    if total_sales <= 0:
        raise ValueError(f"total_sales must be greater than 0, got {total_sales}")
    return (ad_spend / total_sales) * 100


@register_metric(
    metric_id="acos",
    label="ACoS",
    formula="ACoS = ( Total Ad Spend ÷ Ad Sales ) × 100",
    required_inputs=["ad_spend", "ad_sales"],
)
def calc_acos(ad_spend: float, ad_sales: float) -> float:
    """ACoS = ad_spend / ad_sales * 100"""
    if ad_sales <= 0:
        raise ValueError(f"ad_sales must be greater than 0, got {ad_sales}")
    return (ad_spend / ad_sales) * 100


@register_metric(
    metric_id="organic_sales",
    label="Organic Sales",
    formula="Organic Sales = Total Sales − Ad Sales",
    required_inputs=["ad_sales", "total_sales"],
    unit=MetricUnit.CURRENCY,
)
def calc_organic_sales(ad_sales: float, total_sales: float) -> float:
    """Organic_Sales = total_sales - ad_sales"""
    if ad_sales > total_sales:
        raise ValueError("ad_sales cannot be greater than total_sales")
    return total_sales - ad_sales


@register_metric(
    metric_id="organic_percent",
    label="Organic Sales %",
    formula="Organic % = ( ( Total Sales − Ad Sales ) ÷ Total Sales ) × 100",
    required_inputs=["ad_sales", "total_sales"],
)
def calc_organic_percent(ad_sales: float, total_sales: float) -> float:
    """Organic_% = organic_sales / total_sales * 100"""
    if total_sales <= 0:
        raise ValueError(f"total_sales must be greater than 0, got {total_sales}")
    return (calc_organic_sales(ad_sales, total_sales) / total_sales) * 100
