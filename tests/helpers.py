from datetime import date

from expense_dashboard.models import Expense


def make_expense(expense_id, category, amount, merchant='Shop', day=1, notes=None):
    return Expense(
        id=str(expense_id),
        date=date(2024, 4, day),
        category=category,
        merchant=merchant,
        amount=amount,
        notes=notes,
    )
