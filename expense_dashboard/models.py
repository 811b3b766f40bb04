"""Core records for the expense dashboard.

Expenses and recurring payments are immutable once created.  The monthly
budget is an ordered list of category definitions so the display order and
the set of valid categories come from a single place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Expense:
    id: str
    date: date
    category: str
    merchant: str
    amount: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class RecurringPayment:
    """A known upcoming charge, shown for reference only."""

    id: str
    title: str
    amount: float
    next_due: date
    category: str


@dataclass(frozen=True)
class CategoryDefinition:
    name: str
    allocated: float


@dataclass(frozen=True)
class MonthlyBudget:
    """Overall monthly ceiling plus per-category allocations."""

    total: float
    categories: Tuple[CategoryDefinition, ...] = ()

    @property
    def category_names(self) -> List[str]:
        return [definition.name for definition in self.categories]

    def allocation_for(self, category: str) -> float:
        for definition in self.categories:
            if definition.name == category:
                return definition.allocated
        return 0.0


@dataclass(frozen=True)
class BudgetUsage:
    category: str
    allocated: float
    spent: float
    remaining: float
    utilization: float

    @property
    def exceeded(self) -> bool:
        """True once nothing is left of the allocation."""
        return self.remaining <= 0


@dataclass(frozen=True)
class Summary:
    total_spent: float
    count: int
    average: float
    spent_by_category: Dict[str, float] = field(default_factory=dict)
    budget_usage: Tuple[BudgetUsage, ...] = ()
    filtered: Tuple[Expense, ...] = ()


@dataclass
class ExpenseDraft:
    """Raw quick-add form values, all as entered."""

    date: str = ""
    category: str = ""
    merchant: str = ""
    amount: str = ""
    notes: str = ""
