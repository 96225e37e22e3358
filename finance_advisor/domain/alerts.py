"""Alerts derived by comparing two successive analysis reports (generation only, no delivery)"""

from typing import List, Optional

from finance_advisor.domain.models import Alert, Anomaly, AnalysisReport


def health_score_alert(health_score: int, previous_score: Optional[int] = None) -> Alert:
    """
    Describe the current health score band.

    Bands:
    - 80+:   excellent (low severity)
    - 60-79: good (low)
    - 40-59: worrying (medium)
    - <40:   critical (high)
    """
    score_change = health_score - (previous_score if previous_score is not None else health_score)

    if health_score >= 80:
        title = "Saúde Financeira Excelente!"
        message = f"Score: {health_score}/100" + (f" (+{score_change})" if score_change > 0 else "")
        severity = "low"
    elif health_score >= 60:
        title = "Saúde Financeira Boa"
        message = f"Score: {health_score}/100 ({score_change:+d})"
        severity = "low"
    elif health_score >= 40:
        title = "Saúde Financeira Preocupante"
        message = f"Score: {health_score}/100 - Procure melhorar"
        severity = "medium"
    else:
        title = "Saúde Financeira Crítica"
        message = f"Score: {health_score}/100 - Ação urgente necessária"
        severity = "high"

    return Alert(
        type="health_score_update",
        title=title,
        message=message,
        severity=severity,
        data={
            "healthScore": health_score,
            "previousScore": previous_score,
            "scoreChange": score_change,
        },
    )


def anomaly_alert(anomaly: Anomaly) -> Alert:
    return Alert(
        type="anomaly_detected",
        title="Gasto Anormal Detectado",
        message=f"{anomaly.category}: {anomaly.amount:.2f} (Z-score: {anomaly.z_score:.1f}x)",
        severity="high",
        category=anomaly.category,
        data=anomaly.to_dict(),
    )


def diff_reports(
    previous: Optional[AnalysisReport],
    current: AnalysisReport,
    max_anomaly_alerts: int = 2,
) -> List[Alert]:
    """
    Alerts worth raising when `current` replaces `previous`.

    - Health score changed: one health alert
    - Anomalies appeared where there were none: one alert per anomaly, newest first
    Nothing is raised for the first report of a session.
    """
    if previous is None:
        return []

    alerts: List[Alert] = []

    if previous.health_score != current.health_score:
        alerts.append(health_score_alert(current.health_score, previous.health_score))

    if current.anomalies and not previous.anomalies:
        alerts.extend(anomaly_alert(a) for a in current.anomalies[:max_anomaly_alerts])

    return alerts
