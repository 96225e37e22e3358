"""Unit tests for input coercion and contract violations"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from finance_advisor.domain.exceptions import DomainException, InvalidInputError
from finance_advisor.domain.inputs import coerce_goals, coerce_transactions
from finance_advisor.domain.models import Transaction


def _record(**overrides):
    record = {"id": "t1", "type": "expense", "amount": 10, "category": "Lazer", "date": "2024-01-15"}
    record.update(overrides)
    return record


def test_mappings_are_coerced():
    [txn] = coerce_transactions([_record(amount="12.50", description="")])

    assert txn == Transaction(id="t1", type="expense", amount=12.5, category="Lazer", date=date(2024, 1, 15))


def test_dataclasses_pass_through(make_transaction):
    original = make_transaction("income", 50.0, "Salário")
    assert coerce_transactions([original]) == [original]


def test_decimal_and_datetime_values():
    [txn] = coerce_transactions([_record(amount=Decimal("99.99"), date=datetime(2024, 3, 1, 18, 30))])

    assert txn.amount == 99.99
    assert txn.date == date(2024, 3, 1)


@pytest.mark.parametrize("value", ["2024-03-01T23:59:59Z", "2024-03-01T23:59:59+02:00", " 2024-03-01 "])
def test_iso_timestamp_is_truncated_to_date(value):
    [txn] = coerce_transactions([_record(date=value)])
    assert txn.date == date(2024, 3, 1)


@pytest.mark.parametrize("amount", ["abc", None, True, float("nan"), float("inf"), [10]])
def test_non_numeric_amount_is_rejected(amount):
    with pytest.raises(InvalidInputError) as exc_info:
        coerce_transactions([_record(), _record(amount=amount)])

    assert exc_info.value.index == 1
    assert exc_info.value.field == "amount"
    assert str(exc_info.value).startswith("item 1:")


@pytest.mark.parametrize("txn_type", [None, "", "transfer", 1])
def test_missing_or_unknown_type_is_rejected(txn_type):
    with pytest.raises(InvalidInputError) as exc_info:
        coerce_transactions([_record(type=txn_type)])

    assert exc_info.value.field == "type"


@pytest.mark.parametrize(
    "value", [None, "15/01/2024", "not a date", 20240115, "2024-01-15-garbage", "2024-01-15 trailing"]
)
def test_malformed_date_is_rejected(value):
    with pytest.raises(InvalidInputError) as exc_info:
        coerce_transactions([_record(date=value)])

    assert exc_info.value.field == "date"


def test_invalid_input_is_a_domain_exception():
    assert issubclass(InvalidInputError, DomainException)


def test_negative_amounts_are_not_validated():
    [txn] = coerce_transactions([_record(amount=-5)])
    assert txn.amount == -5.0


def test_goals_accept_camel_case_fields():
    [goal] = coerce_goals([
        {"id": "g1", "name": "Carro", "targetAmount": "20000", "currentAmount": 1500,
         "deadline": "2025-12-31", "status": "active"}
    ])

    assert goal.target_amount == 20000.0
    assert goal.current_amount == 1500.0
    assert goal.deadline == date(2025, 12, 31)
    assert goal.status == "active"


def test_goal_with_bad_deadline_is_rejected():
    with pytest.raises(InvalidInputError):
        coerce_goals([{"id": "g1", "name": "Carro", "targetAmount": 10, "deadline": "soon"}])


def test_none_inputs_are_empty():
    assert coerce_transactions(None) == []
    assert coerce_goals(None) == []


def test_inputs_are_not_mutated():
    records = [_record(amount="12.50")]
    snapshot = [dict(r) for r in records]

    coerce_transactions(records)

    assert records == snapshot
