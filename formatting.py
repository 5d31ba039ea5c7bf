"""pt-BR display helpers for amounts, percentages and dates."""

from __future__ import annotations

from typing import Any

from finance_utils import parse_date, round_currency

CURRENCY_SYMBOL = "R$"


def _pt_br_number(value: float) -> str:
    # 1,234.56 -> 1.234,56
    return f"{value:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")


def format_brl(value) -> str:
    amount = round_currency(value or 0)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {_pt_br_number(abs(amount))}"


def format_percent(value) -> str:
    return f"{_pt_br_number(round_currency(value or 0))}%"


def format_date(value: Any) -> str:
    """Render as DD/MM/YYYY; values that are not dates come back as text."""
    parsed = parse_date(value)
    if parsed is None:
        return "" if value is None else str(value)
    return parsed.strftime("%d/%m/%Y")
