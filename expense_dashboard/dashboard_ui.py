"""Streamlit UI components for the expense dashboard.

Each ``render_*`` method draws one section of the page from the current
:class:`~expense_dashboard.state.DashboardState`.  The table builders at the
top of the module are plain pandas helpers so they can be tested without a
running Streamlit server.
"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd
import streamlit as st
from streamlit.errors import StreamlitAPIException

from .aggregation import budget_usage_frame
from .config import ALL_CATEGORIES
from .formatting import (
    escape_dollar_for_markdown,
    format_currency,
    format_date,
    format_notes,
    format_percent,
)
from .models import Expense, ExpenseDraft, RecurringPayment, Summary
from .state import DashboardState
from .validation import ValidationFailure
from . import visualization as viz

QUICK_ADD_KEYS = {
    'date': 'quick_add_date',
    'category': 'quick_add_category',
    'merchant': 'quick_add_merchant',
    'amount': 'quick_add_amount',
    'notes': 'quick_add_notes',
}
FILTER_KEY = 'transaction_filter'


def transactions_display_frame(expenses: Sequence[Expense]) -> pd.DataFrame:
    """Rows for the transaction table, in store order."""
    rows = [
        {
            'Date': format_date(expense.date),
            'Merchant': expense.merchant,
            'Category': expense.category,
            'Amount': format_currency(expense.amount),
            'Notes': format_notes(expense.notes),
        }
        for expense in expenses
    ]
    return pd.DataFrame(rows, columns=['Date', 'Merchant', 'Category', 'Amount', 'Notes'])


def recurring_display_frame(payments: Sequence[RecurringPayment]) -> pd.DataFrame:
    rows = [
        {
            'Title': payment.title,
            'Category': payment.category,
            'Amount': format_currency(payment.amount),
            'Due': format_date(payment.next_due),
        }
        for payment in payments
    ]
    return pd.DataFrame(rows, columns=['Title', 'Category', 'Amount', 'Due'])


def budget_display_frame(summary: Summary) -> pd.DataFrame:
    """Per-category budget table with money and utilization formatted."""
    frame = budget_usage_frame(summary)
    for column in ('Allocated', 'Spent', 'Remaining'):
        frame[column] = frame[column].map(format_currency)
    frame['Utilization'] = frame['Utilization'].map(format_percent)
    return frame


def transactions_caption(selected_category: str, shown: int) -> str:
    if selected_category == ALL_CATEGORIES:
        return f"Showing {shown} expenses"
    return f"Filtered by {selected_category}"


def validation_messages(failure: ValidationFailure) -> List[str]:
    """One line per failing field, in the order the fields were checked."""
    return [' '.join(messages) for messages in failure.messages_by_field().values()]


def draft_from_session(session_state) -> ExpenseDraft:
    """Collect the quick-add widget values into a draft of plain strings."""
    raw_date = session_state.get(QUICK_ADD_KEYS['date'])
    if raw_date is None:
        date_text = ''
    elif hasattr(raw_date, 'isoformat'):
        date_text = raw_date.isoformat()
    else:
        date_text = str(raw_date)
    return ExpenseDraft(
        date=date_text,
        category=session_state.get(QUICK_ADD_KEYS['category']) or '',
        merchant=session_state.get(QUICK_ADD_KEYS['merchant']) or '',
        amount=session_state.get(QUICK_ADD_KEYS['amount']) or '',
        notes=session_state.get(QUICK_ADD_KEYS['notes']) or '',
    )


def clear_quick_add(session_state) -> None:
    session_state[QUICK_ADD_KEYS['date']] = None
    for name in ('category', 'merchant', 'amount', 'notes'):
        session_state[QUICK_ADD_KEYS[name]] = ''


def submit_quick_add(state: DashboardState, session_state) -> None:
    """Form callback: validate the widget values and clear them on success."""
    expense = state.quick_add(draft_from_session(session_state))
    if expense is not None:
        clear_quick_add(session_state)


class ExpenseDashboardUI:
    """UI sections for the expense dashboard."""
    _PAGE_CONFIGURED = False

    def __init__(self, state: DashboardState, *, configure_page: bool = False):
        self.state = state
        if configure_page:
            self.setup_page_config()

    def setup_page_config(self) -> None:
        """Configure Streamlit page settings once per process."""
        if ExpenseDashboardUI._PAGE_CONFIGURED:
            return
        try:
            st.set_page_config(
                page_title="Expense Overview",
                page_icon="💸",
                layout="wide",
            )
        except StreamlitAPIException:
            # Already configured upstream; avoid raising to keep reruns smooth.
            pass
        finally:
            ExpenseDashboardUI._PAGE_CONFIGURED = True

    def render_header(self, summary: Summary) -> None:
        col1, col2 = st.columns([3, 1])
        with col1:
            st.title("Expense Overview")
            st.markdown("Track where your money goes and stay ahead of your spending goals.")
        with col2:
            st.metric(label="This month", value=format_currency(summary.total_spent))

    def render_quick_add(self) -> None:
        """Render the quick-add form and any validation messages."""
        st.subheader("➕ Quick Add")
        st.caption("Log a new expense in seconds.")

        failure = self.state.last_failure
        if failure is not None:
            for message in validation_messages(failure):
                st.error(message)

        with st.form("quick_add_form", clear_on_submit=False):
            col1, col2, col3, col4 = st.columns(4)
            with col1:
                st.date_input("Date", value=None, key=QUICK_ADD_KEYS['date'])
            with col2:
                st.selectbox(
                    "Category",
                    options=[''] + self.state.categories,
                    format_func=lambda category: category or "Select",
                    key=QUICK_ADD_KEYS['category'],
                )
            with col3:
                st.text_input("Merchant", placeholder="Where did you spend?", key=QUICK_ADD_KEYS['merchant'])
            with col4:
                st.text_input("Amount", placeholder="0.00", key=QUICK_ADD_KEYS['amount'])
            st.text_input("Notes", placeholder="Optional context", key=QUICK_ADD_KEYS['notes'])
            st.form_submit_button(
                "Add Expense",
                on_click=submit_quick_add,
                args=(self.state, st.session_state),
            )

    def render_summary_cards(self, summary: Summary) -> None:
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Total spent", format_currency(summary.total_spent))
            st.caption(f"{summary.count} tracked transactions")
        with col2:
            st.metric("Average expense", format_currency(summary.average))
            st.caption("Keep everyday costs mindful")
        with col3:
            st.metric("Budget used", format_percent(self.state.budget_used_percent(summary)))
            st.caption("of monthly allocation")
        with col4:
            st.metric("Remaining", format_currency(self.state.remaining_budget(summary)))
            st.caption("before you hit your limit")

    def render_budget_rows(self, summary: Summary) -> None:
        """Per-category spend against allocation."""
        st.subheader("📋 Spending by category")
        st.caption("Compare actual spend against your plan.")
        for usage in summary.budget_usage:
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"**{usage.category}**")
            with col2:
                st.markdown(escape_dollar_for_markdown(
                    f"{format_currency(usage.spent)} / {format_currency(usage.allocated)}"
                ))
            st.progress(usage.utilization / 100)
            if usage.exceeded:
                st.caption("Budget exceeded")
            else:
                st.caption(escape_dollar_for_markdown(f"{format_currency(usage.remaining)} left"))

        with st.expander("Details"):
            st.dataframe(budget_display_frame(summary), hide_index=True, use_container_width=True)
            st.plotly_chart(viz.create_budget_bar_chart(summary), use_container_width=True)
            st.plotly_chart(viz.create_category_pie_chart(summary.spent_by_category), use_container_width=True)

    def render_recurring(self) -> None:
        st.subheader("🔁 Upcoming payments")
        st.caption("Anticipate recurring charges before they land.")
        if not self.state.recurring:
            st.info("No recurring payments.")
            return
        st.dataframe(recurring_display_frame(self.state.recurring), hide_index=True, use_container_width=True)

    def render_filter(self) -> None:
        st.subheader("🔎 Filter transactions")
        st.caption("Focus on a single category to explore details.")
        options = self.state.filter_options
        selected = st.radio(
            "Category",
            options=options,
            index=options.index(self.state.selected_category),
            horizontal=True,
            key=FILTER_KEY,
            label_visibility="collapsed",
        )
        self.state.set_filter(selected)

    def render_transactions(self, summary: Summary) -> None:
        st.subheader("🧾 Transactions")
        st.caption(transactions_caption(self.state.selected_category, len(summary.filtered)))
        st.dataframe(transactions_display_frame(summary.filtered), hide_index=True, use_container_width=True)
