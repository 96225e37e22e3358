"""Unit tests for category trends and the next-month forecast"""

import pytest
from datetime import date
from finance_advisor.domain.analyzer import analyze
from finance_advisor.domain.models import CategoryPattern
from finance_advisor.domain.trends import (
    analyze_category_trends,
    forecast_next_month,
    monthly_category_totals,
    percent_change,
)


def _pattern(average: float, trend: float = 0.0) -> CategoryPattern:
    return CategoryPattern(average=average, max=average, min=average, standard_deviation=0.0, frequency=1, trend=trend)


def test_monthly_totals_bucket_by_year_month(make_transaction):
    totals = monthly_category_totals([
        make_transaction("expense", 100.0, "Alimentação", date(2024, 1, 3)),
        make_transaction("expense", 50.0, "Alimentação", date(2024, 1, 28)),
        make_transaction("expense", 70.0, "Alimentação", date(2023, 1, 28)),
        make_transaction("income", 999.0, "Alimentação", date(2024, 1, 28)),
    ])

    assert totals["2024-01"]["Alimentação"] == 150.0
    assert totals["2023-01"]["Alimentação"] == 70.0


def test_growing_category(make_transaction):
    trends = analyze_category_trends([
        make_transaction("expense", 100.0, "Alimentação", date(2024, 1, 3)),
        make_transaction("expense", 50.0, "Alimentação", date(2024, 1, 20)),
        make_transaction("expense", 300.0, "Alimentação", date(2024, 2, 10)),
    ])

    food = trends["Alimentação"]
    assert food.current == 300.0
    assert food.previous == 150.0
    assert food.change == 100.0
    assert food.direction == "crescente"
    assert food.trend == pytest.approx(150.0)


def test_months_sorted_chronologically_regardless_of_input_order(make_transaction):
    trends = analyze_category_trends([
        make_transaction("expense", 80.0, "Lazer", date(2024, 3, 1)),
        make_transaction("expense", 100.0, "Lazer", date(2024, 1, 1)),
    ])

    assert trends["Lazer"].previous == 100.0
    assert trends["Lazer"].current == 80.0
    assert trends["Lazer"].change == -20.0
    assert trends["Lazer"].direction == "decrescente"


def test_equal_months_are_not_growing(make_transaction):
    trends = analyze_category_trends([
        make_transaction("expense", 100.0, "Contas", date(2024, 1, 1)),
        make_transaction("expense", 100.0, "Contas", date(2024, 2, 1)),
    ])

    assert trends["Contas"].direction == "decrescente"
    assert trends["Contas"].change == 0.0


def test_single_month_category_is_omitted(make_transaction):
    trends = analyze_category_trends([
        make_transaction("expense", 100.0, "Saúde", date(2024, 1, 1)),
        make_transaction("expense", 300.0, "Saúde", date(2024, 1, 25)),
    ])
    assert trends == {}


def test_category_order_follows_first_appearance(make_transaction):
    transactions = [
        make_transaction("income", 1000.0, "Casa", date(2024, 1, 1)),
        make_transaction("expense", 10.0, "Lazer", date(2024, 1, 2)),
        make_transaction("expense", 10.0, "Casa", date(2024, 1, 3)),
        make_transaction("expense", 20.0, "Lazer", date(2024, 2, 2)),
        make_transaction("expense", 20.0, "Casa", date(2024, 2, 3)),
    ]

    assert list(analyze_category_trends(transactions)) == ["Casa", "Lazer"]


def test_percent_change_guards_zero_previous():
    assert percent_change(50.0, 0.0) is None
    assert percent_change(115.0, 100.0) == 15.0


def test_forecast_applies_trend():
    forecast = forecast_next_month({"Alimentação": _pattern(100.0, trend=10.0), "Lazer": _pattern(50.0)})

    assert forecast == {"Alimentação": 200.0, "Lazer": 50.0, "total": 250.0}


def test_forecast_empty_patterns():
    assert forecast_next_month({}) == {"total": 0}


def test_forecast_total_matches_entries():
    forecast = forecast_next_month({
        "Moradia": _pattern(1234.56, trend=-3.3),
        "Transporte": _pattern(87.19, trend=1.7),
    })
    others = sum(v for k, v in forecast.items() if k != "total")

    assert forecast["total"] == pytest.approx(others, abs=0.01)


def test_forecast_total_does_not_drift_across_many_categories(make_transaction):
    """Each category predicts 1.004; the total must add up the rounded 1.00 entries"""
    transactions = []
    for i in range(6):
        transactions.append(make_transaction("expense", 0.98, f"Cat{i}", date(2024, 1, 1)))
        transactions.append(make_transaction("expense", 1.02, f"Cat{i}", date(2024, 1, 2)))

    forecast = analyze(transactions).forecast_monthly
    others = [v for k, v in forecast.items() if k != "total"]

    assert others == [1.0] * 6
    assert forecast["total"] == pytest.approx(sum(others), abs=0.01)
    assert forecast["total"] == pytest.approx(6.0)


def test_forecast_total_overrides_category_named_total():
    forecast = forecast_next_month({"total": _pattern(10.0), "Lazer": _pattern(5.0)})
    assert forecast["total"] == 15.0
