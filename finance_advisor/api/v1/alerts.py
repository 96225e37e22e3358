"""POST /v1/alerts - alerts raised when a new snapshot replaces the previous one"""

from fastapi import APIRouter, Depends, Request

from finance_advisor.api.dependencies import get_request_id, get_settings
from finance_advisor.api.v1.analysis import run_analysis
from finance_advisor.api.v1.schemas import AlertsRequest, AlertsResponse
from finance_advisor.config import Settings
from finance_advisor.domain.alerts import diff_reports
from finance_advisor.infrastructure.observability.metrics import record_alerts

router = APIRouter()


@router.post("/alerts", response_model=AlertsResponse)
def create_alerts(
    body: AlertsRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Diff the analyses of two snapshots.

    Without a previous snapshot no alerts are raised.
    """
    request_id = get_request_id(request)

    previous = run_analysis(body.previous, settings, request_id) if body.previous else None
    current = run_analysis(body.current, settings, request_id)

    alerts = diff_reports(previous, current, max_anomaly_alerts=settings.max_anomaly_alerts)
    record_alerts(alerts)

    return {
        "healthScore": current.health_score,
        "alerts": [alert.to_dict() for alert in alerts],
    }
