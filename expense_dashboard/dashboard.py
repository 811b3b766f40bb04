"""Streamlit app for the expense dashboard.

To run the dashboard from the command line::

    streamlit run expense_dashboard/dashboard.py

or use ``python run_dashboard.py`` from the project root.
"""

from __future__ import annotations

import os
import sys

import streamlit as st

# Conditional imports to support execution both as part of a package and
# directly as a script, which is how ``streamlit run`` loads this file.
if __package__:
    from .dashboard_ui import ExpenseDashboardUI
    from .logging_config import configure_logging
    from .state import ensure_state
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from expense_dashboard.dashboard_ui import ExpenseDashboardUI  # type: ignore
    from expense_dashboard.logging_config import configure_logging  # type: ignore
    from expense_dashboard.state import ensure_state  # type: ignore


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    state = ensure_state(st.session_state)
    ui = ExpenseDashboardUI(state, configure_page=True)

    summary = state.summary()
    ui.render_header(summary)
    ui.render_quick_add()
    ui.render_summary_cards(summary)
    ui.render_budget_rows(summary)

    left, right = st.columns(2)
    with left:
        ui.render_recurring()
    with right:
        ui.render_filter()

    # The filter may have changed above
    ui.render_transactions(state.summary())


if __name__ == "__main__":  # pragma: no cover
    main()
