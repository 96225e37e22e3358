"""Analysis engine - core entry point turning transactions and goals into a report"""

from typing import Any, Iterable, List

from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.domain.inputs import coerce_goals, coerce_transactions
from finance_advisor.domain.insights import generate_insights
from finance_advisor.domain.models import ORDER_BY_DATE, ORDER_BY_INPUT, AnalysisReport, Transaction
from finance_advisor.domain.recommendations import RecommendationContext, generate_recommendations
from finance_advisor.domain.scoring import ScoreContext, calculate_health_score
from finance_advisor.domain.statistics import calculate_summary, detect_anomalies, detect_patterns
from finance_advisor.domain.trends import analyze_category_trends, forecast_next_month

ORDER_BY_CHOICES = (ORDER_BY_INPUT, ORDER_BY_DATE)


def order_transactions(transactions: List[Transaction], order_by: str) -> List[Transaction]:
    """
    Apply the ordering that pattern trends and the recent-anomaly window see.

    "input" keeps the caller's order; "date" sorts by date, keeping input order
    for transactions on the same day.
    """
    if order_by == ORDER_BY_INPUT:
        return transactions
    if order_by == ORDER_BY_DATE:
        return sorted(transactions, key=lambda t: t.date)
    raise InvalidInputError(
        f"order_by must be one of {', '.join(ORDER_BY_CHOICES)}, got {order_by!r}",
        field="order_by",
    )


def analyze(
    transactions: Iterable[Any] | None,
    goals: Iterable[Any] | None = None,
    order_by: str = ORDER_BY_INPUT,
) -> AnalysisReport:
    """
    Main entry point: build a complete AnalysisReport from one input snapshot.

    Accepts Transaction/Goal instances or plain mappings. Raises
    InvalidInputError for malformed records; every other edge case degrades
    to empty or zero-valued fields.

    Flow:
    1. Coerce and order inputs
    2. Summary, patterns, anomalies, category trends, forecast
    3. Health score and recommendations from the stage outputs
    4. Insights
    """
    txns = order_transactions(coerce_transactions(transactions), order_by)
    goal_list = coerce_goals(goals)

    summary = calculate_summary(txns)
    patterns = detect_patterns(txns)
    anomalies = detect_anomalies(txns, patterns)
    category_analysis = analyze_category_trends(txns)
    forecast = forecast_next_month(patterns)

    health_score = calculate_health_score(
        ScoreContext(summary=summary, anomalies=anomalies, transactions=txns, goals=goal_list)
    )
    recommendations = generate_recommendations(
        RecommendationContext(
            summary=summary,
            patterns=patterns,
            anomalies=anomalies,
            trends=category_analysis,
            goals=goal_list,
        )
    )

    return AnalysisReport(
        summary=summary,
        patterns=patterns,
        anomalies=anomalies,
        category_analysis=category_analysis,
        forecast_monthly=forecast,
        health_score=health_score,
        recommendations=recommendations,
        insights=generate_insights(summary, patterns, txns),
    )
