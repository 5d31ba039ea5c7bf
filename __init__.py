"""Personal Finance Tracker package.

A single-page tracker for income and expense entries.  Run the page with
``streamlit run app.py``; the calculations behind the totals and the table
live in ``finance_utils.py``.
"""
