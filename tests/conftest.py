"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from finance_advisor.api.main import create_app
from finance_advisor.domain.models import Goal, Transaction


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults"""
    counter = {"n": 0}

    def _make(
        type: str = "expense",
        amount: float = 100.0,
        category: str = "Alimentação",
        day: date = date(2024, 1, 15),
        description: str | None = None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=f"tx_{counter['n']}",
            type=type,
            amount=amount,
            category=category,
            date=day,
            description=description,
        )

    return _make


@pytest.fixture
def sample_transactions(make_transaction) -> list[Transaction]:
    """Three months of salary plus groceries, rent and leisure, in date order"""
    transactions = []
    for month in (1, 2, 3):
        transactions.append(make_transaction("income", 5000.0, "Salário", date(2024, month, 5)))
        transactions.append(make_transaction("expense", 1500.0, "Moradia", date(2024, month, 6)))
        transactions.append(make_transaction("expense", 300.0 + month * 100, "Alimentação", date(2024, month, 10)))
        transactions.append(make_transaction("expense", 80.0, "Lazer", date(2024, month, 20)))
    return transactions


@pytest.fixture
def sample_goals() -> list[Goal]:
    return [
        Goal(id="g1", name="Fundo de emergência", target_amount=10000.0, current_amount=2500.0,
             deadline=date(2024, 12, 31), status="active"),
        Goal(id="g2", name="Viagem", target_amount=3000.0, current_amount=3000.0,
             deadline=date(2024, 6, 30), status="completed"),
    ]
