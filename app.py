import sys
from pathlib import Path

import streamlit as st

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

import config
from dashboard import (
    FILTER_OPTIONS,
    SORT_OPTIONS,
    _kpis,
    add_transaction_form,
    transactions_table,
)
from finance_utils import transactions_for_display
from storage import add_transaction, delete_transaction, load_transactions

# --- Configuration ---
st.set_page_config(page_title="Controle Financeiro", layout="wide", page_icon="💰")
config.configure_logging()

# --- Transactions (read once per session, rewritten after every change) ---
if "transactions" not in st.session_state:
    st.session_state["transactions"] = load_transactions()


def get_transactions():
    return st.session_state["transactions"]


def handle_delete(key: str):
    updated, saved = delete_transaction(get_transactions(), key)
    if saved:
        st.session_state["transactions"] = updated
        st.session_state["flash"] = ("success", "Transação excluída com sucesso!")
    else:
        st.session_state["flash"] = ("error", "Não foi possível excluir a transação. Tente novamente.")


if "flash" in st.session_state:
    level, message = st.session_state.pop("flash")
    if level == "success":
        st.success(message)
    else:
        st.error(message)

# --- Summary ---
_kpis(get_transactions())

st.divider()
st.title("Histórico de Transações")

col_filter, col_sort = st.columns(2)
with col_filter:
    filter_label = st.selectbox("Filtrar por tipo", list(FILTER_OPTIONS))
with col_sort:
    sort_label = st.selectbox("Ordenação", list(SORT_OPTIONS))

with st.expander("➕ Adicionar Transação"):
    new_transaction = add_transaction_form()
    if new_transaction is not None:
        updated, saved = add_transaction(get_transactions(), new_transaction)
        if saved:
            st.session_state["transactions"] = updated
            st.session_state["flash"] = ("success", "Transação adicionada com sucesso!")
            st.rerun()
        else:
            st.error("Não foi possível salvar a transação. Tente novamente.")

rows = transactions_for_display(
    get_transactions(),
    FILTER_OPTIONS[filter_label],
    SORT_OPTIONS[sort_label],
)
transactions_table(rows, on_delete=handle_delete, page_size=config.page_size())
