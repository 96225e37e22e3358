"""Unit tests for structured logging"""

import json
import logging

from finance_advisor.infrastructure.observability.logging import CustomJsonFormatter, log_analysis, setup_logging


def test_setup_logging_installs_json_formatter():
    setup_logging("DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)


def test_analysis_log_is_one_json_record(capsys):
    setup_logging("INFO")

    log_analysis("req-1", transaction_count=9, goal_count=1, health_score=80, anomaly_count=0, duration_ms=1.5)

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "Analysis completed"
    assert record["level"] == "INFO"
    assert record["service"] == "finance-advisor"
    assert record["request_id"] == "req-1"
    assert record["health_score"] == 80
    assert "timestamp" in record
