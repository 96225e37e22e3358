"""Input coercion - turns caller records into domain models, failing fast on contract violations"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Mapping

from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.domain.models import TRANSACTION_TYPES, Goal, Transaction
from finance_advisor.utils.date_utils import parse_calendar_date

_MISSING = object()


def _get(record: Any, *keys: str, default: Any = _MISSING) -> Any:
    # Accepts snake_case and the store's camelCase spelling of the same field
    for key in keys:
        if isinstance(record, Mapping):
            if key in record and record[key] is not None:
                return record[key]
        elif getattr(record, key, None) is not None:
            return getattr(record, key)
    return default


def _coerce_amount(value: Any, index: int, field: str) -> float:
    if value is _MISSING:
        raise InvalidInputError(f"'{field}' is required", index=index, field=field)
    if isinstance(value, bool):
        raise InvalidInputError(f"'{field}' must be numeric, got bool", index=index, field=field)

    if isinstance(value, (int, float, Decimal)):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(Decimal(value.strip()))
        except InvalidOperation:
            raise InvalidInputError(f"'{field}' must be numeric, got {value!r}", index=index, field=field)
    else:
        raise InvalidInputError(
            f"'{field}' must be numeric, got {type(value).__name__}", index=index, field=field
        )

    if not math.isfinite(amount):
        raise InvalidInputError(f"'{field}' must be finite, got {value!r}", index=index, field=field)
    return amount


def _coerce_date(value: Any, index: int, field: str):
    day = parse_calendar_date(value)
    if day is None:
        raise InvalidInputError(f"'{field}' is not a valid date: {value!r}", index=index, field=field)
    return day


def coerce_transaction(record: Any, index: int = 0) -> Transaction:
    txn_type = _get(record, "type", default="")
    if not isinstance(txn_type, str) or not txn_type:
        raise InvalidInputError("'type' is required", index=index, field="type")
    if txn_type not in TRANSACTION_TYPES:
        raise InvalidInputError(
            f"'type' must be one of {', '.join(TRANSACTION_TYPES)}, got {txn_type!r}",
            index=index,
            field="type",
        )

    raw_date = _get(record, "date")
    if raw_date is _MISSING:
        raise InvalidInputError("'date' is required", index=index, field="date")

    return Transaction(
        id=str(_get(record, "id", default=index)),
        type=txn_type,
        amount=_coerce_amount(_get(record, "amount"), index, "amount"),
        category=str(_get(record, "category", default="")),
        date=_coerce_date(raw_date, index, "date"),
        description=_get(record, "description", default=None) or None,
        currency=_get(record, "currency", default=None),
    )


def coerce_goal(record: Any, index: int = 0) -> Goal:
    raw_deadline = _get(record, "deadline", default=None)
    return Goal(
        id=str(_get(record, "id", default=index)),
        name=str(_get(record, "name", default="")),
        target_amount=_coerce_amount(
            _get(record, "target_amount", "targetAmount", default=0), index, "target_amount"
        ),
        current_amount=_coerce_amount(
            _get(record, "current_amount", "currentAmount", default=0), index, "current_amount"
        ),
        deadline=None if raw_deadline is None else _coerce_date(raw_deadline, index, "deadline"),
        status=str(_get(record, "status", default="")),
    )


def coerce_transactions(records: Iterable[Any] | None) -> List[Transaction]:
    """Build domain transactions from dataclasses or plain mappings, in the supplied order"""
    return [coerce_transaction(record, i) for i, record in enumerate(records or [])]


def coerce_goals(records: Iterable[Any] | None) -> List[Goal]:
    return [coerce_goal(record, i) for i, record in enumerate(records or [])]
