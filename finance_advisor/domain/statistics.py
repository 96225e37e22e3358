"""Summary, per-category spending patterns and anomaly detection"""

from collections import defaultdict
from typing import Dict, List, Sequence

from finance_advisor.domain.models import (
    EXPENSE,
    INCOME,
    Anomaly,
    CategoryPattern,
    Summary,
    Transaction,
)
from finance_advisor.utils.stats import linear_trend, population_std_dev

RECENT_EXPENSE_WINDOW = 30
ANOMALY_Z_THRESHOLD = 2.0
HIGH_SEVERITY_Z_THRESHOLD = 3.0
MIN_STD_DEV = 1.0


def expenses_of(transactions: Sequence[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.type == EXPENSE]


def calculate_summary(transactions: Sequence[Transaction]) -> Summary:
    """
    Total income, expenses, balance and savings rate.

    savings_rate is balance as a percentage of income (1 decimal), 0 without income.
    """
    income = round(sum(t.amount for t in transactions if t.type == INCOME), 2)
    expenses = round(sum(t.amount for t in transactions if t.type == EXPENSE), 2)
    # Derived from the rounded totals so the three reported figures agree
    balance = round(income - expenses, 2)

    savings_rate = round(balance / income * 100, 1) if income > 0 else 0.0

    return Summary(
        total_income=income,
        total_expenses=expenses,
        balance=balance,
        savings_rate=savings_rate,
        transaction_count=len(transactions),
    )


def group_expense_amounts(transactions: Sequence[Transaction]) -> Dict[str, List[float]]:
    """Expense amounts per category, in the order the transactions were supplied"""
    by_category: Dict[str, List[float]] = defaultdict(list)
    for txn in expenses_of(transactions):
        by_category[txn.category].append(txn.amount)
    return dict(by_category)


def detect_patterns(transactions: Sequence[Transaction]) -> Dict[str, CategoryPattern]:
    """
    Descriptive statistics per expense category.

    trend is the least-squares slope of the category's amounts against their
    position in the supplied sequence, so it only reflects time when the
    caller passes date-sorted data.
    """
    patterns: Dict[str, CategoryPattern] = {}
    for category, amounts in group_expense_amounts(transactions).items():
        patterns[category] = CategoryPattern(
            average=round(sum(amounts) / len(amounts), 2),
            max=round(max(amounts), 2),
            min=round(min(amounts), 2),
            standard_deviation=round(population_std_dev(amounts), 2),
            frequency=len(amounts),
            trend=linear_trend(amounts),
        )
    return patterns


def z_score(amount: float, pattern: CategoryPattern) -> float:
    # Floor of 1 keeps single-observation categories (deviation 0) finite
    return abs(amount - pattern.average) / max(pattern.standard_deviation, MIN_STD_DEV)


def detect_anomalies(
    transactions: Sequence[Transaction],
    patterns: Dict[str, CategoryPattern],
) -> List[Anomaly]:
    """
    Flag unusually large or small recent expenses.

    Only the last RECENT_EXPENSE_WINDOW expenses of the supplied sequence are
    checked. Results are sorted newest first.
    """
    anomalies: List[Anomaly] = []

    for txn in expenses_of(transactions)[-RECENT_EXPENSE_WINDOW:]:
        pattern = patterns.get(txn.category)
        if pattern is None:
            continue

        score = z_score(txn.amount, pattern)
        if score <= ANOMALY_Z_THRESHOLD:
            continue

        anomalies.append(
            Anomaly(
                transaction=txn.label,
                category=txn.category,
                amount=txn.amount,
                date=txn.date,
                severity="alta" if score > HIGH_SEVERITY_Z_THRESHOLD else "média",
                reason=(
                    f"Gasto de {txn.amount:.2f} em {txn.category} está {score:.1f}x "
                    f"acima do normal (média: {pattern.average:.2f})"
                ),
                z_score=round(score, 2),
            )
        )

    # Stable: same-day anomalies keep their input order
    anomalies.sort(key=lambda a: a.date, reverse=True)
    return anomalies
