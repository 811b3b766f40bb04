"""In-memory expense store.

The store is an immutable, most-recent-first sequence of expenses.
Appending returns a new store and leaves the original untouched, so a
session can swap its store reference in one step.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from .models import Expense


class ExpenseStore:
    """Ordered collection of expenses, newest first."""

    def __init__(self, expenses: Iterable[Expense] = ()):
        self._expenses: Tuple[Expense, ...] = tuple(expenses)
        ids = [expense.id for expense in self._expenses]
        if len(ids) != len(set(ids)):
            raise ValueError("Expense ids must be unique within a store")

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return self._expenses

    def append(self, expense: Expense) -> "ExpenseStore":
        """Return a new store with ``expense`` placed at the head."""
        if self.contains(expense.id):
            raise ValueError(f"Expense id '{expense.id}' is already in the store")
        return ExpenseStore((expense,) + self._expenses)

    def contains(self, expense_id: str) -> bool:
        return any(expense.id == expense_id for expense in self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def __repr__(self) -> str:
        return f"ExpenseStore({len(self._expenses)} expenses)"
