"""Plotly visualisation helpers for the expense dashboard.

Each function accepts a :class:`~expense_dashboard.models.Summary` (or a
piece of one) and returns a `plotly.graph_objects.Figure` that Streamlit
renders via ``st.plotly_chart``.
"""

from __future__ import annotations

from typing import Dict

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .models import Summary


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def create_budget_bar_chart(summary: Summary, title: str | None = None) -> go.Figure:
    """Grouped bars comparing allocated and spent amounts per category.

    Parameters
    ----------
    summary : Summary
        Dashboard summary whose ``budget_usage`` rows are plotted in order.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Grouped bar chart with one ``Allocated`` and one ``Spent`` trace.
    """
    if not summary.budget_usage:
        return _empty_figure()
    categories = [usage.category for usage in summary.budget_usage]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        name='Allocated',
        x=categories,
        y=[usage.allocated for usage in summary.budget_usage],
        marker_color='#1f77b4',
    ))
    fig.add_trace(go.Bar(
        name='Spent',
        x=categories,
        y=[usage.spent for usage in summary.budget_usage],
        marker_color='#ff7f0e',
    ))
    fig.update_layout(
        title=title or "Budget vs Spent",
        barmode='group',
        xaxis_title="Category",
        yaxis_title="Amount ($)",
        xaxis_tickangle=-30,
    )
    return fig


def create_category_pie_chart(spent_by_category: Dict[str, float], title: str | None = None) -> go.Figure:
    """Pie chart of spending share per category."""
    if not spent_by_category:
        return _empty_figure()
    df = pd.DataFrame(list(spent_by_category.items()), columns=["Category", "Spent"])
    fig = px.pie(
        df,
        names="Category",
        values="Spent",
        color_discrete_sequence=px.colors.qualitative.Set3,
    )
    fig.update_traces(textposition='inside', textinfo='percent+label')
    fig.update_layout(title=title or "Spending by Category")
    return fig
