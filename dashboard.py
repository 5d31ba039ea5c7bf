# dashboard.py — summary cards, add form and paginated transactions table

import math
from typing import Any, Callable, List, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from finance_utils import calculate_balance, calculate_financial_summary, field_value
from formatting import format_brl, format_date, format_percent
from models import Transaction, TransactionForm, form_errors, transaction_type

FILTER_OPTIONS = {
    "Todas": None,
    "Entradas": "income",
    "Saídas": "expense",
}

SORT_OPTIONS = {
    "Ordenar por Data": "date",
    "Ordenar por Valor": "amount",
    "Ordenar por Descrição": "description",
}

TABLE_COLUMNS = ["Descrição", "Valor", "Data", "Tipo"]
TYPE_LABELS = {"income": "Entrada", "expense": "Saída"}


def _prep(transactions: Sequence[Any]) -> pd.DataFrame:
    """
    Prepares the rows for display, keeping the order they were given in.
    """
    if not transactions:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    rows = []
    for txn in transactions:
        amount = field_value(txn, "amount") or 0
        rows.append(
            {
                "Descrição": field_value(txn, "description") or "",
                "Valor": format_brl(amount),
                "Data": format_date(field_value(txn, "date")),
                # Label follows the amount sign, not any stored tag
                "Tipo": TYPE_LABELS[transaction_type(amount)],
            }
        )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def paginate(items: Sequence[Any], page: int, page_size: int) -> Tuple[List[Any], int]:
    """
    Returns the slice for a 1-based page and the total page count.
    Out-of-range pages are clamped; an empty list still has one page.
    """
    page_size = max(int(page_size), 1)
    page_count = max(math.ceil(len(items) / page_size), 1)
    page = min(max(int(page), 1), page_count)
    start = (page - 1) * page_size
    return list(items[start:start + page_size]), page_count


def _kpis(transactions: Sequence[Any]):
    """
    Displays the top-level totals.
    """
    summary = calculate_financial_summary(transactions)
    balance = calculate_balance(transactions)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("💰 Total de Entradas", format_brl(summary.income))
    col2.metric("💸 Total de Saídas", format_brl(-summary.expenses))
    col3.metric("🏦 Saldo Atual", format_brl(balance))
    col4.metric("📈 Taxa de Poupança", format_percent(summary.savings_rate))


def _amount_color(value: str) -> str:
    return "color: #FF5252" if value.startswith("-") else "color: #4CAF50"


def add_transaction_form() -> Optional[Transaction]:
    """
    Renders the add-transaction form. Returns the new entry once it validates.
    """
    with st.form("add_transaction", clear_on_submit=True):
        description = st.text_input("Descrição", placeholder="Descrição da transação")
        amount = st.number_input("Valor", value=None, step=0.01, format="%.2f", placeholder="Valor da transação")
        when = st.date_input("Data", value=None, format="DD/MM/YYYY")
        submitted = st.form_submit_button("Adicionar", type="primary", use_container_width=True)

    if not submitted:
        return None

    try:
        form = TransactionForm(description=description, amount=amount, date=when)
    except ValidationError as exc:
        for message in form_errors(exc):
            st.error(message)
        return None
    return form.to_transaction()


def transactions_table(
    transactions: Sequence[Any],
    on_delete: Callable[[str], None],
    page_size: int = 5,
    state_key: str = "table_page",
):
    """
    Paginated table with one delete button per row.
    """
    if not transactions:
        st.info("Nenhuma transação registrada.")
        return

    page_count = max(math.ceil(len(transactions) / max(page_size, 1)), 1)
    if st.session_state.get(state_key, 1) > page_count:
        st.session_state[state_key] = page_count
    page = st.number_input("Página", min_value=1, max_value=page_count, step=1, key=state_key)
    rows, _ = paginate(transactions, page, page_size)

    frame = _prep(rows)
    st.dataframe(
        frame.style.map(_amount_color, subset=["Valor"]),
        hide_index=True,
        use_container_width=True,
    )

    for txn in rows:
        key = field_value(txn, "key")
        if key is None:
            continue
        label = f"Excluir “{field_value(txn, 'description') or ''}”"
        st.button(label, key=f"delete_{key}", on_click=on_delete, args=(key,), type="secondary")
