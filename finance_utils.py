"""Pure calculations over a list of transactions.

Every function takes the caller's list (dicts or objects with ``amount``,
``date`` and ``description``), leaves it untouched and returns a new value.
Income and expense are told apart by the sign of ``amount`` alone.
"""

from __future__ import annotations

import unicodedata
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import cmp_to_key
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd

from models import EXPENSE, INCOME, FinancialSummary

CENT = Decimal("0.01")


def field_value(transaction: Any, key: str) -> Any:
    if isinstance(transaction, Mapping):
        return transaction.get(key)
    return getattr(transaction, key, None)


def _amount(transaction: Any):
    value = field_value(transaction, "amount")
    return 0 if value is None else value


def round_currency(value) -> float:
    """Round half-up to two decimal places."""
    number = Decimal(str(value))
    if not number.is_finite():
        return float(number)
    with localcontext() as ctx:
        # room for every integer digit plus the two decimals
        ctx.prec = max(28, number.adjusted() + 3)
        return float(number.quantize(CENT, rounding=ROUND_HALF_UP))


def parse_date(value: Any) -> Optional[datetime]:
    """Best-effort conversion to a naive datetime. None when the value is not a date."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    parsed = pd.to_datetime(text, errors="coerce", format="ISO8601")
    if pd.isna(parsed):
        parsed = pd.to_datetime(text, errors="coerce", dayfirst=True)
    if pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_localize(None)
    return parsed.to_pydatetime()


def _collation_key(text: Any) -> str:
    normalized = unicodedata.normalize("NFKD", "" if text is None else str(text))
    stripped = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return stripped.casefold()


def _sign(number) -> int:
    return (number > 0) - (number < 0)


def filter_by_type(transactions: Iterable[Any], filter_type: Optional[str] = None) -> List[Any]:
    if filter_type == INCOME:
        return [t for t in transactions if _amount(t) >= 0]
    if filter_type == EXPENSE:
        return [t for t in transactions if _amount(t) < 0]
    return list(transactions)


def compare_by_key(a: Any, b: Any, sort_key: str) -> int:
    """Ascending comparison on any field. Missing or incomparable values tie."""
    left = field_value(a, sort_key)
    right = field_value(b, sort_key)
    try:
        if left < right:
            return -1
        if left > right:
            return 1
    except TypeError:
        pass
    return 0


def compare_for_display(a: Any, b: Any, sort_key: str) -> int:
    """Table ordering: newest date first, largest amount first, description A-Z."""
    if sort_key == "date":
        left = parse_date(field_value(a, "date"))
        right = parse_date(field_value(b, "date"))
        # Unreadable dates tie with everything, like NaN timestamps; their
        # position then depends on input order.
        if left is None or right is None:
            return 0
        return _sign((right - left).total_seconds())
    if sort_key == "amount":
        return _sign(_amount(b) - _amount(a))

    left = _collation_key(field_value(a, "description"))
    right = _collation_key(field_value(b, "description"))
    return (left > right) - (left < right)


def filter_and_sort_transactions(
    transactions: Iterable[Any],
    filter_type: Optional[str] = None,
    sort_key: str = "date",
) -> List[Any]:
    retained = filter_by_type(transactions, filter_type)
    return sorted(retained, key=cmp_to_key(lambda a, b: compare_by_key(a, b, sort_key)))


def sort_for_display(transactions: Iterable[Any], sort_key: str = "date") -> List[Any]:
    return sorted(transactions, key=cmp_to_key(lambda a, b: compare_for_display(a, b, sort_key)))


def transactions_for_display(
    transactions: Iterable[Any],
    filter_type: Optional[str] = None,
    sort_key: str = "date",
) -> List[Any]:
    """Rows in the order the table shows them."""
    return sort_for_display(filter_by_type(transactions, filter_type), sort_key)


def calculate_balance(transactions: Iterable[Any]):
    """Net sum of every amount, unrounded."""
    return sum((_amount(t) for t in transactions), 0)


def calculate_financial_summary(transactions: Iterable[Any]) -> FinancialSummary:
    amounts = [_amount(t) for t in transactions]

    income = round_currency(sum((a for a in amounts if a >= 0), 0))
    expenses = round_currency(sum((abs(a) for a in amounts if a < 0), 0))
    # Balance comes from the rounded totals, not from the raw amounts.
    balance = round_currency(income - expenses)
    savings_rate = round_currency(balance / income * 100) if income != 0 else 0.0

    return FinancialSummary(
        income=income,
        expenses=expenses,
        balance=balance,
        savings_rate=savings_rate,
    )
