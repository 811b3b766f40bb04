"""Summary calculations for the expense dashboard.

This module contains pure functions that turn the current expense list,
the monthly budget and the active category filter into the figures shown
on the dashboard.  Nothing here touches Streamlit, so every function can
be unit tested and re-run on each render.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import ALL_CATEGORIES, BUDGET_USED_DISPLAY_CAP
from .models import BudgetUsage, Expense, MonthlyBudget, Summary

EXPENSE_COLUMNS = ['id', 'date', 'category', 'merchant', 'amount', 'notes']


def expenses_to_frame(expenses: Sequence[Expense]) -> pd.DataFrame:
    """Convert expenses to a DataFrame, keeping the store order as the index."""
    if not expenses:
        frame = pd.DataFrame(columns=EXPENSE_COLUMNS)
        frame['amount'] = frame['amount'].astype(float)
        return frame
    frame = pd.DataFrame([asdict(expense) for expense in expenses], columns=EXPENSE_COLUMNS)
    frame['amount'] = pd.to_numeric(frame['amount'], errors='coerce').fillna(0.0)
    return frame


def category_budget_usage(category: str, allocated: float, spent: float) -> BudgetUsage:
    """Compute allocation, spend, remaining and utilization for one category.

    ``remaining`` never drops below zero and ``utilization`` is capped at 100;
    an allocation of zero yields a utilization of zero.
    """
    remaining = max(allocated - spent, 0.0)
    utilization = min(spent / allocated * 100, 100.0) if allocated > 0 else 0.0
    return BudgetUsage(
        category=category,
        allocated=float(allocated),
        spent=float(spent),
        remaining=float(remaining),
        utilization=float(utilization),
    )


def filter_expenses(expenses: Sequence[Expense], selected_category: str = ALL_CATEGORIES) -> Tuple[Expense, ...]:
    """Restrict ``expenses`` to one category, preserving order.

    The ``"All"`` sentinel returns every expense.
    """
    if selected_category == ALL_CATEGORIES:
        return tuple(expenses)
    frame = expenses_to_frame(expenses)
    positions = frame.index[frame['category'] == selected_category]
    return tuple(expenses[position] for position in positions)


def summarize(
    expenses: Sequence[Expense],
    budget: MonthlyBudget,
    selected_category: str = ALL_CATEGORIES,
) -> Summary:
    """Derive the dashboard summary.

    Totals, average and per-category spend always cover the whole expense
    list; only ``filtered`` honours ``selected_category``.
    """
    expenses = tuple(expenses)
    frame = expenses_to_frame(expenses)

    total_spent = float(frame['amount'].sum()) if not frame.empty else 0.0
    count = len(frame)
    average = total_spent / count if count else 0.0

    spent_by_category: Dict[str, float] = {}
    if count:
        grouped = frame.groupby('category', sort=False)['amount'].sum()
        spent_by_category = {str(category): float(amount) for category, amount in grouped.items()}

    budget_usage = tuple(
        category_budget_usage(
            definition.name,
            definition.allocated,
            spent_by_category.get(definition.name, 0.0),
        )
        for definition in budget.categories
    )

    return Summary(
        total_spent=total_spent,
        count=count,
        average=average,
        spent_by_category=spent_by_category,
        budget_usage=budget_usage,
        filtered=filter_expenses(expenses, selected_category),
    )


def budget_used_percent(total_spent: float, total_budget: float) -> int:
    """Whole-number share of the monthly budget spent, capped for display.

    Halves round up.  A zero budget reports 0 when nothing is spent and the
    cap otherwise.
    """
    if total_budget <= 0:
        return 0 if total_spent <= 0 else BUDGET_USED_DISPLAY_CAP
    percent = int(np.floor(total_spent / total_budget * 100 + 0.5))
    return min(percent, BUDGET_USED_DISPLAY_CAP)


def remaining_budget(total_spent: float, total_budget: float) -> float:
    """Money left in the monthly budget.  Negative once overspent."""
    return float(total_budget - total_spent)


def budget_usage_frame(summary: Summary) -> pd.DataFrame:
    """Tabular view of the per-category budget rows."""
    rows = [
        {
            'Category': usage.category,
            'Allocated': usage.allocated,
            'Spent': usage.spent,
            'Remaining': usage.remaining,
            'Utilization': usage.utilization,
            'Status': 'Budget exceeded' if usage.exceeded else 'On track',
        }
        for usage in summary.budget_usage
    ]
    return pd.DataFrame(rows, columns=['Category', 'Allocated', 'Spent', 'Remaining', 'Utilization', 'Status'])
