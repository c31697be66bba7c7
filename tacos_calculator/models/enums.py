from enum import Enum


class ValidationErrorKind(str, Enum):
    MISSING_OR_NON_NUMERIC = "missing_or_non_numeric"
    TOTAL_SALES_NOT_POSITIVE = "total_sales_not_positive"
    AD_SALES_NOT_POSITIVE = "ad_sales_not_positive"
    AD_SPEND_NEGATIVE = "ad_spend_negative"
    AD_SALES_EXCEEDS_TOTAL_SALES = "ad_sales_exceeds_total_sales"


class InputField(str, Enum):
    AD_SPEND = "ad_spend"
    AD_SALES = "ad_sales"
    TOTAL_SALES = "total_sales"


class ResultKind(str, Enum):
    OK = "ok"
    ERROR = "error"


class MetricUnit(str, Enum):
    PERCENT = "percent"
    CURRENCY = "currency"


class SessionState(str, Enum):
    EMPTY = "empty"
    EDITING = "editing"
    EVALUATED_OK = "evaluated_ok"
    EVALUATED_ERROR = "evaluated_error"
