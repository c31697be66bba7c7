"""Ordered registry of the derived advertising metrics.

Formulas register themselves with ``@register_metric`` when
``metric_library.formulas`` is imported. Registration order is the order the
calculator fills ``DerivedMetrics`` and the order ``/api/metrics`` lists them,
so the formula legend and the result card line up.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, Iterator, Optional

from tacos_calculator.models.enums import MetricUnit
from tacos_calculator.models.inputs import ParsedInputs

_INPUT_NAMES = frozenset(f.name for f in fields(ParsedInputs))


@dataclass(frozen=True)
class MetricDefinition:
    """One metric: its display label, legend text and the inputs it reads."""

    id: str
    label: str
    formula: str
    required_inputs: tuple[str, ...]
    formula_fn: Callable[..., float]
    unit: MetricUnit = MetricUnit.PERCENT

    def compute(self, inputs: ParsedInputs) -> float:
        kwargs = {name: getattr(inputs, name) for name in self.required_inputs}
        return self.formula_fn(**kwargs)


class MetricRegistry:
    def __init__(self) -> None:
        self._definitions: dict[str, MetricDefinition] = {}

    def register(
        self,
        metric_id: str,
        label: str,
        formula: str,
        required_inputs: list[str],
        unit: MetricUnit = MetricUnit.PERCENT,
    ) -> Callable[[Callable[..., float]], Callable[..., float]]:
        """Decorator form: file the wrapped formula under ``metric_id``."""
        unknown = set(required_inputs) - _INPUT_NAMES
        if unknown:
            raise ValueError(f"metric '{metric_id}' reads unknown inputs: {sorted(unknown)}")

        def decorator(fn: Callable[..., float]) -> Callable[..., float]:
            if metric_id in self._definitions:
                raise ValueError(f"metric '{metric_id}' is already registered")
            self._definitions[metric_id] = MetricDefinition(
                id=metric_id,
                label=label,
                formula=formula,
                required_inputs=tuple(required_inputs),
                formula_fn=fn,
                unit=unit,
            )
            return fn

        return decorator

    def get(self, metric_id: str) -> Optional[MetricDefinition]:
        return self._definitions.get(metric_id)

    def snapshot(self) -> dict[str, MetricDefinition]:
        return dict(self._definitions)

    def __iter__(self) -> Iterator[MetricDefinition]:
        return iter(list(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)


METRICS = MetricRegistry()

register_metric = METRICS.register


def get_metric(metric_id: str) -> Optional[MetricDefinition]:
    return METRICS.get(metric_id)


def get_all_metrics() -> dict[str, MetricDefinition]:
    """Registered metrics by id, in registration order (a detached copy)."""
    return METRICS.snapshot()
