"""Tests for pt-BR display formatting."""

from datetime import date

from formatting import format_brl, format_date, format_percent


def test_format_brl_uses_brazilian_separators() -> None:
    assert format_brl(1234.56) == "R$ 1.234,56"
    assert format_brl(1500) == "R$ 1.500,00"
    assert format_brl(1234567.891) == "R$ 1.234.567,89"


def test_format_brl_negative_and_zero() -> None:
    assert format_brl(-50) == "-R$ 50,00"
    assert format_brl(0) == "R$ 0,00"
    assert format_brl(None) == "R$ 0,00"


def test_format_percent() -> None:
    assert format_percent(69.99) == "69,99%"
    assert format_percent(100) == "100,00%"


def test_format_date_from_iso_and_date() -> None:
    assert format_date("2025-03-29") == "29/03/2025"
    assert format_date(date(2025, 1, 5)) == "05/01/2025"
    assert format_date("29/03/2025") == "29/03/2025"


def test_format_date_keeps_unparseable_text() -> None:
    assert format_date("ontem") == "ontem"
    assert format_date(None) == ""


def test_format_brl_large_amount() -> None:
    formatted = format_brl(1e27)

    assert formatted.startswith("R$ 1.000.000.000.000.000.")
    assert formatted.endswith(",00")
