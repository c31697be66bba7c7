"""Maps validation reasons to user-facing messages and the field they concern."""

from __future__ import annotations

from tacos_calculator.models.enums import InputField, ValidationErrorKind

_ERROR_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.MISSING_OR_NON_NUMERIC: "Enter a number for Total Ad Spend, Ad Sales and Total Sales.",
    ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE: "Total Sales must be greater than 0.",
    ValidationErrorKind.AD_SALES_NOT_POSITIVE: "Ad Sales must be greater than 0.",
    ValidationErrorKind.AD_SPEND_NEGATIVE: "Ad Spend cannot be negative.",
    ValidationErrorKind.AD_SALES_EXCEEDS_TOTAL_SALES: "Ad Sales cannot be greater than Total Sales.",
}

# None -> the reason is not tied to a single field
FIELD_FOR_REASON: dict[ValidationErrorKind, InputField | None] = {
    ValidationErrorKind.MISSING_OR_NON_NUMERIC: None,
    ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE: InputField.TOTAL_SALES,
    ValidationErrorKind.AD_SALES_NOT_POSITIVE: InputField.AD_SALES,
    ValidationErrorKind.AD_SPEND_NEGATIVE: InputField.AD_SPEND,
    ValidationErrorKind.AD_SALES_EXCEEDS_TOTAL_SALES: InputField.AD_SALES,
}


def get_error_message(reason: ValidationErrorKind) -> str:
    """Return the human-readable message for a validation reason."""
    return _ERROR_MESSAGES[reason]


_MISSING_MESSAGES: dict[InputField, str] = {
    InputField.AD_SPEND: "Enter your Total Ad Spend.",
    InputField.AD_SALES: "Enter your Ad Sales.",
    InputField.TOTAL_SALES: "Enter your Total Sales.",
}


def get_missing_message(field: InputField) -> str:
    """Inline message for a field that is empty or not a number."""
    return _MISSING_MESSAGES[field]
