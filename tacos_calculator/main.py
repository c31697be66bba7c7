"""FastAPI application for the TACoS calculator — evaluation REST endpoints."""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tacos_calculator.config.settings import get_settings
from tacos_calculator.engine.calculator import MetricCalculator
from tacos_calculator.engine.sanitizer import sanitize
from tacos_calculator.hooks.audit_hooks import log_evaluation
from tacos_calculator.messages import get_error_message
from tacos_calculator.metric_library.registry import get_all_metrics

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="TACoS Calculator API", version="0.1.0")

# CORS — allow the front-end dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = MetricCalculator(currency_symbol=settings.currency_symbol)


class EvaluateRequest(BaseModel):
    ad_spend: str = ""
    ad_sales: str = ""
    total_sales: str = ""


class SanitizeRequest(BaseModel):
    text: str = ""


class SanitizeResponse(BaseModel):
    text: str


@app.post("/api/evaluate")
async def evaluate_metrics(body: EvaluateRequest) -> dict[str, Any]:
    """Validate the three fields and return metrics or the failure reason."""
    result = calculator.evaluate(body.ad_spend, body.ad_sales, body.total_sales)
    log_evaluation(str(uuid4()), body.model_dump(), result)

    payload = result.to_dict()
    if not result.is_ok:
        payload["message"] = get_error_message(result.reason)
    return payload


@app.post("/api/sanitize", response_model=SanitizeResponse)
async def sanitize_text(body: SanitizeRequest):
    """Strip a field edit down to digits and a single decimal point."""
    return SanitizeResponse(text=sanitize(body.text))


@app.get("/api/metrics")
async def list_metrics():
    """Return the metric definitions used by the calculator."""
    return [
        {
            "id": definition.id,
            "label": definition.label,
            "formula": definition.formula,
            "unit": definition.unit.value,
            "required_inputs": list(definition.required_inputs),
        }
        for definition in get_all_metrics().values()
    ]


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
