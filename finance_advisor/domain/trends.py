"""Month-over-month category trends and next-month forecast"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from finance_advisor.domain.models import (
    FORECAST_TOTAL_KEY,
    CategoryPattern,
    CategoryTrend,
    Transaction,
)
from finance_advisor.domain.statistics import expenses_of
from finance_advisor.utils.date_utils import month_key
from finance_advisor.utils.stats import linear_trend

logger = logging.getLogger(__name__)

FORECAST_TREND_WEIGHT = 0.1


def monthly_category_totals(transactions: Sequence[Transaction]) -> Dict[str, Dict[str, float]]:
    """Expense sums keyed by "YYYY-MM" then category"""
    monthly: Dict[str, Dict[str, float]] = defaultdict(lambda: defaultdict(float))
    for txn in expenses_of(transactions):
        monthly[month_key(txn.date)][txn.category] += txn.amount
    return monthly


def percent_change(current: float, previous: float) -> float | None:
    """Relative change in percent (1 decimal); None when previous is zero"""
    if previous == 0:
        return None
    return round((current - previous) / previous * 100, 1)


def analyze_category_trends(transactions: Sequence[Transaction]) -> Dict[str, CategoryTrend]:
    """
    Compare each category's latest month against the one before it.

    Categories are visited in first-appearance order over all transactions.
    Months without spending in a category are skipped, so "previous" is the
    last month that had spending, not necessarily the calendar month before.
    """
    monthly = monthly_category_totals(transactions)
    months = sorted(monthly)

    categories = dict.fromkeys(t.category for t in transactions)

    trends: Dict[str, CategoryTrend] = {}
    for category in categories:
        values: List[float] = [monthly[m].get(category, 0.0) for m in months]
        values = [v for v in values if v > 0]
        if len(values) < 2:
            continue

        current, previous = values[-1], values[-2]
        trends[category] = CategoryTrend(
            trend=linear_trend(values),
            current=round(current, 2),
            previous=round(previous, 2),
            change=percent_change(current, previous),
            direction="crescente" if current > previous else "decrescente",
        )
    return trends


def forecast_next_month(patterns: Dict[str, CategoryPattern]) -> Dict[str, float]:
    """
    Project next month's spend per category from its average and trend.

    The aggregate lives under the reserved "total" key of the same map.
    """
    forecast: Dict[str, float] = {}
    total = 0.0

    for category, pattern in patterns.items():
        predicted = pattern.average * (1 + pattern.trend * FORECAST_TREND_WEIGHT)
        forecast[category] = round(predicted, 2)
        # Sum the reported figures so "total" matches the entries it aggregates
        total += forecast[category]

    if FORECAST_TOTAL_KEY in forecast:
        logger.warning(
            "Category name collides with forecast total key",
            extra={"category": FORECAST_TOTAL_KEY},
        )

    forecast[FORECAST_TOTAL_KEY] = round(total, 2)
    return forecast
