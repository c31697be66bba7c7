"""Parsed inputs and the tagged validation outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import ValidationErrorKind


@dataclass(frozen=True)
class ParsedInputs:
    """The three monetary inputs after parsing."""

    ad_spend: float
    ad_sales: float
    total_sales: float


@dataclass(frozen=True)
class ValidationOutcome:
    """Either Valid(inputs) or Invalid(reason), never both.

    Build instances with ``valid()`` / ``invalid()`` rather than the
    constructor.
    """

    inputs: Optional[ParsedInputs] = None
    reason: Optional[ValidationErrorKind] = None

    def __post_init__(self) -> None:
        if (self.inputs is None) == (self.reason is None):
            raise ValueError("ValidationOutcome needs exactly one of inputs or reason")

    @classmethod
    def valid(cls, inputs: ParsedInputs) -> ValidationOutcome:
        return cls(inputs=inputs)

    @classmethod
    def invalid(cls, reason: ValidationErrorKind) -> ValidationOutcome:
        return cls(reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.inputs is not None
