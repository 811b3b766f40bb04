import pytest

from expense_dashboard.aggregation import (
    budget_usage_frame,
    budget_used_percent,
    category_budget_usage,
    expenses_to_frame,
    filter_expenses,
    remaining_budget,
    summarize,
)
from expense_dashboard.models import MonthlyBudget

from helpers import make_expense


def _expenses():
    return (
        make_expense(1, 'Groceries', 120.25, merchant='Market'),
        make_expense(2, 'Housing', 500.00, merchant='Landlord'),
        make_expense(3, 'Groceries', 80.75, merchant='Bakery'),
        make_expense(4, 'Travel', 40.00, merchant='Train'),
    )


def test_totals_cover_whole_store_regardless_of_filter(budget):
    summary = summarize(_expenses(), budget, 'Housing')

    assert summary.total_spent == pytest.approx(741.00)
    assert summary.count == 4
    assert summary.average == pytest.approx(741.00 / 4)
    assert [expense.id for expense in summary.filtered] == ['2']


def test_total_is_independent_of_order(budget):
    forward = summarize(_expenses(), budget)
    backward = summarize(tuple(reversed(_expenses())), budget)
    assert forward.total_spent == pytest.approx(backward.total_spent)


def test_empty_store_has_zero_average(budget):
    summary = summarize((), budget)

    assert summary.total_spent == 0
    assert summary.count == 0
    assert summary.average == 0
    assert summary.spent_by_category == {}
    assert summary.filtered == ()
    assert [usage.spent for usage in summary.budget_usage] == [0, 0, 0]


def test_spent_by_category_includes_unbudgeted_categories(budget):
    summary = summarize(_expenses(), budget)

    assert summary.spent_by_category['Groceries'] == pytest.approx(201.00)
    assert summary.spent_by_category['Travel'] == pytest.approx(40.00)


def test_budget_usage_lists_every_category_in_definition_order(budget):
    summary = summarize(_expenses(), budget)

    assert [usage.category for usage in summary.budget_usage] == ['Groceries', 'Housing', 'Fun']
    fun = summary.budget_usage[2]
    assert fun.spent == 0
    assert fun.utilization == 0


def test_over_budget_category_is_clamped():
    usage = category_budget_usage('Housing', 500, 750)

    assert usage.remaining == 0
    assert usage.utilization == 100
    assert usage.exceeded


def test_partial_usage():
    usage = category_budget_usage('Groceries', 300, 75)

    assert usage.remaining == pytest.approx(225)
    assert usage.utilization == pytest.approx(25)
    assert not usage.exceeded


def test_zero_allocation_does_not_divide_by_zero():
    usage = category_budget_usage('Fun', 0, 25)

    assert usage.utilization == 0
    assert usage.remaining == 0


def test_all_filter_returns_store_unchanged():
    expenses = _expenses()
    assert filter_expenses(expenses, 'All') == expenses


def test_category_filter_partitions_store():
    expenses = _expenses()
    groceries = filter_expenses(expenses, 'Groceries')
    rest = [expense for expense in expenses if expense.category != 'Groceries']

    assert [expense.merchant for expense in groceries] == ['Market', 'Bakery']
    assert len(groceries) + len(rest) == len(expenses)


def test_unknown_category_filter_is_empty():
    assert filter_expenses(_expenses(), 'Health') == ()


def test_seed_summary(seed):
    summary = summarize(seed.expenses, seed.budget, 'Groceries')

    assert summary.count == 9
    assert summary.total_spent == pytest.approx(1381.76)
    assert [expense.merchant for expense in summary.filtered] == ['Whole Foods', "Trader Joe's"]
    housing = next(usage for usage in summary.budget_usage if usage.category == 'Housing')
    assert housing.utilization == 100
    assert housing.exceeded


def test_budget_used_percent_rounds_and_caps():
    assert budget_used_percent(1381.76, 2200) == 63
    assert budget_used_percent(50, 200) == 25
    assert budget_used_percent(1, 8) == 13  # 12.5 rounds up
    assert budget_used_percent(100000, 2200) == 999
    assert budget_used_percent(0, 0) == 0
    assert budget_used_percent(10, 0) == 999


def test_remaining_budget_goes_negative():
    assert remaining_budget(2500, 2200) == pytest.approx(-300)
    assert remaining_budget(200, 2200) == pytest.approx(2000)


def test_expenses_to_frame_keeps_store_order():
    frame = expenses_to_frame(_expenses())
    assert list(frame['id']) == ['1', '2', '3', '4']
    assert frame['amount'].dtype == float


def test_budget_usage_frame_status(budget):
    frame = budget_usage_frame(summarize(_expenses(), budget))
    statuses = dict(zip(frame['Category'], frame['Status']))

    assert statuses['Groceries'] == 'On track'
    assert statuses['Housing'] == 'Budget exceeded'


def test_summary_with_empty_budget():
    summary = summarize(_expenses(), MonthlyBudget(total=0))
    assert summary.budget_usage == ()
