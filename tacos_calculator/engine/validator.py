"""Parse the three amount fields and classify them as valid or invalid.

Rules run in a fixed order and the first failing rule decides the reason,
so the same inputs always report the same error:

1. every field parses to a finite number
2. total sales > 0
3. ad sales > 0
4. ad spend >= 0
5. ad sales <= total sales
"""

from __future__ import annotations

import math
import re
from typing import Optional

from tacos_calculator.models.enums import ValidationErrorKind
from tacos_calculator.models.inputs import ParsedInputs, ValidationOutcome

# Plain ASCII decimal notation only: no exponents, no inf/nan, no grouping,
# no non-ASCII digits (the sanitizer drops those too).
_AMOUNT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")


def parse_amount(text: str) -> Optional[float]:
    """Parse a single amount, returning None when it is not a finite number."""
    candidate = text.strip()
    if not _AMOUNT_RE.match(candidate):
        return None
    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value


def validate(ad_spend: str, ad_sales: str, total_sales: str) -> ValidationOutcome:
    """Produce exactly one ValidationOutcome for the three field strings."""
    spend = parse_amount(ad_spend)
    sales = parse_amount(ad_sales)
    total = parse_amount(total_sales)

    if spend is None or sales is None or total is None:
        return ValidationOutcome.invalid(ValidationErrorKind.MISSING_OR_NON_NUMERIC)
    if total <= 0:
        return ValidationOutcome.invalid(ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE)
    if sales <= 0:
        return ValidationOutcome.invalid(ValidationErrorKind.AD_SALES_NOT_POSITIVE)
    if spend < 0:
        return ValidationOutcome.invalid(ValidationErrorKind.AD_SPEND_NEGATIVE)
    if sales > total:
        return ValidationOutcome.invalid(ValidationErrorKind.AD_SALES_EXCEEDS_TOTAL_SALES)

    return ValidationOutcome.valid(
        ParsedInputs(ad_spend=spend, ad_sales=sales, total_sales=total)
    )
