"""POST /v1/analysis - full financial analysis of a transaction/goal snapshot"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from finance_advisor.api.dependencies import get_request_id, get_settings
from finance_advisor.api.v1.schemas import AnalysisRequest, AnalysisResponse
from finance_advisor.config import Settings
from finance_advisor.domain.analyzer import analyze
from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.domain.models import AnalysisReport
from finance_advisor.infrastructure.observability.logging import log_analysis
from finance_advisor.infrastructure.observability.metrics import record_analysis, record_invalid_input

router = APIRouter()


def run_analysis(body: AnalysisRequest, settings: Settings, request_id: str) -> AnalysisReport:
    """Analyze one request snapshot; contract violations propagate to the app-level 422 handler"""
    start_time = time.time()
    order_by = body.order_by or settings.default_order_by

    try:
        report = analyze(
            [t.model_dump() for t in body.transactions],
            [g.model_dump() for g in body.goals],
            order_by=order_by,
        )
    except InvalidInputError as e:
        record_invalid_input()
        logging.warning(f"Invalid analysis input: {e}", extra={"request_id": request_id})
        raise

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(report)
    log_analysis(
        request_id,
        transaction_count=len(body.transactions),
        goal_count=len(body.goals),
        health_score=report.health_score,
        anomaly_count=len(report.anomalies),
        duration_ms=duration_ms,
    )
    return report


@router.post("/analysis", response_model=AnalysisResponse)
def create_analysis(
    body: AnalysisRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Analyze the supplied transactions and goals.

    The caller sends the complete snapshot on every call; nothing is stored.
    """
    report = run_analysis(body, settings, get_request_id(request))
    return report.to_dict()
