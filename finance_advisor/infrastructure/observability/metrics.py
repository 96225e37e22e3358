"""Prometheus metrics for analysis volume, health score distribution and alerting"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from finance_advisor.domain.models import Alert, AnalysisReport

# Analysis metrics
analysis_counter = Counter(
    "finance_analysis_total",
    "Total analysis runs",
    ["outcome"],  # ok | invalid_input
)

health_score_histogram = Histogram(
    "finance_health_score",
    "Health score of produced reports",
    buckets=[20, 40, 60, 80, 100],
)

anomalies_counter = Counter(
    "finance_anomalies_detected_total",
    "Anomalies flagged across all reports",
)

alerts_counter = Counter(
    "finance_alerts_generated_total",
    "Alerts generated from report diffs",
    ["type"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(report: AnalysisReport) -> None:
    """Record metrics for one successfully produced report"""
    analysis_counter.labels(outcome="ok").inc()
    health_score_histogram.observe(report.health_score)
    anomalies_counter.inc(len(report.anomalies))


def record_invalid_input() -> None:
    analysis_counter.labels(outcome="invalid_input").inc()


def record_alerts(alerts: Iterable[Alert]) -> None:
    for alert in alerts:
        alerts_counter.labels(type=alert.type).inc()
