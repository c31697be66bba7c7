from .enums import InputField, MetricUnit, ResultKind, SessionState, ValidationErrorKind
from .inputs import ParsedInputs, ValidationOutcome

__all__ = [
    "InputField",
    "MetricUnit",
    "ParsedInputs",
    "ResultKind",
    "SessionState",
    "ValidationErrorKind",
    "ValidationOutcome",
]
