"""Tests for parsing and the ordered validation rules."""

import pytest

from tacos_calculator.engine.validator import parse_amount, validate
from tacos_calculator.models.enums import ValidationErrorKind
from tacos_calculator.models.inputs import ParsedInputs, ValidationOutcome


class TestParseAmount:
    def test_integer(self):
        assert parse_amount("500") == 500.0

    def test_decimal(self):
        assert parse_amount("12.75") == pytest.approx(12.75)

    def test_leading_and_trailing_point(self):
        assert parse_amount(".5") == pytest.approx(0.5)
        assert parse_amount("5.") == 5.0

    def test_surrounding_whitespace_ignored(self):
        assert parse_amount("  42 ") == 42.0

    def test_negative_parses(self):
        assert parse_amount("-5") == -5.0

    @pytest.mark.parametrize(
        "text", ["", "   ", ".", "abc", "1,000", "$5", "inf", "nan", "1e3", "1.2.3", "-", "٥٠٠", "５００"]
    )
    def test_rejects_non_numeric(self, text):
        assert parse_amount(text) is None


class TestValidate:
    def test_valid_triple(self):
        outcome = validate("500", "2000", "2500")
        assert outcome.is_valid
        assert outcome.reason is None
        assert outcome.inputs == ParsedInputs(ad_spend=500.0, ad_sales=2000.0, total_sales=2500.0)

    def test_missing_field(self):
        outcome = validate("", "2000", "2500")
        assert outcome.reason == ValidationErrorKind.MISSING_OR_NON_NUMERIC
        assert outcome.inputs is None

    def test_non_numeric_field(self):
        assert validate("500", "lots", "2500").reason == ValidationErrorKind.MISSING_OR_NON_NUMERIC

    def test_total_sales_zero(self):
        assert validate("500", "2000", "0").reason == ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE

    def test_total_sales_negative(self):
        assert validate("500", "2000", "-1").reason == ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE

    def test_ad_sales_zero(self):
        assert validate("500", "0", "2500").reason == ValidationErrorKind.AD_SALES_NOT_POSITIVE

    def test_ad_spend_negative(self):
        assert validate("-5", "2000", "2500").reason == ValidationErrorKind.AD_SPEND_NEGATIVE

    def test_ad_spend_zero_allowed(self):
        assert validate("0", "2000", "2500").is_valid

    def test_ad_sales_exceeds_total(self):
        assert validate("500", "2600", "2500").reason == ValidationErrorKind.AD_SALES_EXCEEDS_TOTAL_SALES

    def test_ad_sales_equal_to_total_allowed(self):
        assert validate("500", "2500", "2500").is_valid


class TestRuleOrder:
    def test_missing_beats_everything(self):
        # total is zero and spend negative, but ad sales is missing
        assert validate("-5", "", "0").reason == ValidationErrorKind.MISSING_OR_NON_NUMERIC

    def test_total_checked_before_ad_sales(self):
        assert validate("500", "0", "0").reason == ValidationErrorKind.TOTAL_SALES_NOT_POSITIVE

    def test_ad_sales_checked_before_spend(self):
        assert validate("-5", "0", "2500").reason == ValidationErrorKind.AD_SALES_NOT_POSITIVE

    def test_spend_checked_before_exceeds(self):
        assert validate("-5", "2600", "2500").reason == ValidationErrorKind.AD_SPEND_NEGATIVE


class TestValidationOutcome:
    def test_valid_constructor(self):
        inputs = ParsedInputs(ad_spend=1.0, ad_sales=1.0, total_sales=1.0)
        outcome = ValidationOutcome.valid(inputs)
        assert outcome.is_valid
        assert outcome.inputs is inputs

    def test_invalid_constructor(self):
        outcome = ValidationOutcome.invalid(ValidationErrorKind.AD_SPEND_NEGATIVE)
        assert not outcome.is_valid

    def test_both_set_raises(self):
        with pytest.raises(ValueError, match="exactly one"):
            ValidationOutcome(
                inputs=ParsedInputs(ad_spend=1.0, ad_sales=1.0, total_sales=1.0),
                reason=ValidationErrorKind.AD_SPEND_NEGATIVE,
            )

    def test_neither_set_raises(self):
        with pytest.raises(ValueError, match="exactly one"):
            ValidationOutcome()


class TestNonAsciiDigits:
    def test_arabic_indic_amount_is_missing(self):
        outcome = validate("٥٠٠", "2000", "2500")
        assert outcome.reason == ValidationErrorKind.MISSING_OR_NON_NUMERIC

    def test_fullwidth_amount_is_missing(self):
        outcome = validate("500", "２０００", "2500")
        assert outcome.reason == ValidationErrorKind.MISSING_OR_NON_NUMERIC
