"""Audit hooks -- logs each evaluation request for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from tacos_calculator.engine.result import EvaluationResult

logger = logging.getLogger(__name__)


def log_evaluation(
    request_id: str,
    inputs: dict[str, str],
    result: EvaluationResult,
) -> dict[str, Any]:
    """Record an evaluation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "request_id": request_id,
        "inputs": dict(inputs),
        "kind": result.kind.value,
        "reason": result.reason.value if result.reason is not None else None,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info("Evaluation audit: %s → %s", request_id, entry["reason"] or entry["kind"])
    return entry
