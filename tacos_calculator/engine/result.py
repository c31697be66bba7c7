"""Immutable metric, display and evaluation result structures."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional

from tacos_calculator.models.enums import ResultKind, ValidationErrorKind


@dataclass(frozen=True)
class DerivedMetrics:
    """Unrounded metrics derived from a valid set of inputs."""

    tacos: float
    acos: float
    organic_sales: float
    organic_percent: float


@dataclass(frozen=True)
class DisplayStrings:
    """Formatted text for each metric, ready to render."""

    tacos: str
    acos: str
    organic_sales: str
    organic_percent: str
    organic_summary: str


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one evaluation: an error reason, or metrics plus display."""

    kind: ResultKind
    reason: Optional[ValidationErrorKind] = None
    metrics: Optional[DerivedMetrics] = None
    display: Optional[DisplayStrings] = None

    @classmethod
    def error(cls, reason: ValidationErrorKind) -> EvaluationResult:
        return cls(kind=ResultKind.ERROR, reason=reason)

    @classmethod
    def ok(cls, metrics: DerivedMetrics, display: DisplayStrings) -> EvaluationResult:
        return cls(kind=ResultKind.OK, metrics=metrics, display=display)

    @property
    def is_ok(self) -> bool:
        return self.kind is ResultKind.OK

    def to_dict(self) -> dict[str, Any]:
        if self.is_ok:
            return {
                "kind": self.kind.value,
                # JSON has no infinity; overflowing ratios go out as null
                "metrics": {
                    name: value if math.isfinite(value) else None
                    for name, value in asdict(self.metrics).items()
                },
                "display": asdict(self.display),
            }
        return {"kind": self.kind.value, "reason": self.reason.value}
