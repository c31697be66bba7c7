"""CalculatorSession -- the caller-side state behind a calculator form.

The engine is stateless; a front end keeps the raw field text and the last
evaluation here. Edits go through the sanitizer, "Calculate" evaluates, and
"Clear" resets everything.
"""

from __future__ import annotations

import logging
from typing import Optional

from tacos_calculator.engine.calculator import MetricCalculator
from tacos_calculator.engine.result import EvaluationResult
from tacos_calculator.engine.sanitizer import sanitize
from tacos_calculator.engine.validator import parse_amount, validate
from tacos_calculator.messages import FIELD_FOR_REASON, get_error_message, get_missing_message
from tacos_calculator.models.enums import InputField, SessionState, ValidationErrorKind
from tacos_calculator.models.inputs import ValidationOutcome

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Holds raw field text and the most recent EvaluationResult."""

    def __init__(self, calculator: Optional[MetricCalculator] = None) -> None:
        self._calculator = calculator or MetricCalculator()
        self._fields: dict[InputField, str] = {field: "" for field in InputField}
        self._result: Optional[EvaluationResult] = None
        self._state = SessionState.EMPTY

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def result(self) -> Optional[EvaluationResult]:
        return self._result

    def value(self, field: InputField) -> str:
        return self._fields[InputField(field)]

    def edit(self, field: InputField, text: str) -> str:
        """Replace a field's text with its sanitized form and return it."""
        field = InputField(field)
        cleaned = sanitize(text)
        self._fields[field] = cleaned
        self._result = None
        if any(self._fields.values()):
            self._state = SessionState.EDITING
        else:
            self._state = SessionState.EMPTY
        return cleaned

    @property
    def is_ready(self) -> bool:
        """True when the current fields would evaluate successfully."""
        return self._validate().is_valid

    def calculate(self) -> EvaluationResult:
        """Evaluate the current fields and keep the result."""
        result = self._calculator.evaluate(
            self._fields[InputField.AD_SPEND],
            self._fields[InputField.AD_SALES],
            self._fields[InputField.TOTAL_SALES],
        )
        self._result = result
        self._state = SessionState.EVALUATED_OK if result.is_ok else SessionState.EVALUATED_ERROR
        logger.debug("Session evaluated: %s", result.kind.value)
        return result

    def hint(self, field: InputField) -> Optional[str]:
        """Inline message for a field, or None when the field is not at fault."""
        field = InputField(field)
        outcome = self._validate()
        if outcome.is_valid:
            return None
        if outcome.reason is ValidationErrorKind.MISSING_OR_NON_NUMERIC:
            if parse_amount(self._fields[field]) is None:
                return get_missing_message(field)
            return None
        if FIELD_FOR_REASON[outcome.reason] is not field:
            return None
        return get_error_message(outcome.reason)

    def clear(self) -> None:
        """Reset every field and drop the last result."""
        for field in InputField:
            self._fields[field] = ""
        self._result = None
        self._state = SessionState.EMPTY

    def _validate(self) -> ValidationOutcome:
        return validate(
            self._fields[InputField.AD_SPEND],
            self._fields[InputField.AD_SALES],
            self._fields[InputField.TOTAL_SALES],
        )
