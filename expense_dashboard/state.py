"""Session state for the dashboard.

:class:`DashboardState` owns everything that can change during a session:
the expense store, the active category filter and the quick-add draft.
Widgets never touch those directly; they go through :meth:`quick_add` and
:meth:`set_filter`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, MutableMapping, Optional, Tuple

from .aggregation import budget_used_percent, remaining_budget, summarize
from .config import ALL_CATEGORIES
from .logging_config import get_logger
from .models import Expense, ExpenseDraft, MonthlyBudget, RecurringPayment, Summary
from .seed import SeedData, load_seed
from .store import ExpenseStore
from .validation import ValidationFailure, new_expense_id, validate_draft

logger = get_logger(__name__)

SESSION_KEY = 'expense_dashboard_state'


@dataclass
class DashboardState:
    budget: MonthlyBudget
    store: ExpenseStore = field(default_factory=ExpenseStore)
    recurring: Tuple[RecurringPayment, ...] = ()
    selected_category: str = ALL_CATEGORIES
    draft: ExpenseDraft = field(default_factory=ExpenseDraft)
    last_failure: Optional[ValidationFailure] = None
    id_factory: Callable[[], str] = new_expense_id

    @classmethod
    def from_seed(cls, seed: SeedData, **kwargs) -> "DashboardState":
        return cls(budget=seed.budget, store=ExpenseStore(seed.expenses), recurring=seed.recurring, **kwargs)

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return self.store.expenses

    @property
    def categories(self) -> List[str]:
        return self.budget.category_names

    @property
    def filter_options(self) -> List[str]:
        return [ALL_CATEGORIES] + self.categories

    def set_filter(self, category: str) -> None:
        """Select the category shown in the transaction table."""
        if category not in self.filter_options:
            raise ValueError(f"Unknown category filter '{category}'")
        if category != self.selected_category:
            logger.debug("filter_changed", previous=self.selected_category, selected=category)
        self.selected_category = category

    def quick_add(self, draft: Optional[ExpenseDraft] = None) -> Optional[Expense]:
        """Validate the draft and prepend the resulting expense.

        Returns the new expense, or ``None`` when validation fails.  A
        rejected draft leaves the store untouched and is kept for editing,
        with the reasons in :attr:`last_failure`.
        """
        draft = draft if draft is not None else self.draft
        try:
            expense = validate_draft(draft, categories=self.categories, id_factory=self.id_factory)
        except ValidationFailure as failure:
            self.draft = draft
            self.last_failure = failure
            logger.info("quick_add_rejected", fields=sorted({issue.field for issue in failure.issues}))
            return None

        self.store = self.store.append(expense)
        self.draft = ExpenseDraft()
        self.last_failure = None
        logger.info("expense_added", expense_id=expense.id, category=expense.category, amount=expense.amount)
        return expense

    def summary(self) -> Summary:
        return summarize(self.store.expenses, self.budget, self.selected_category)

    def budget_used_percent(self, summary: Optional[Summary] = None) -> int:
        summary = summary or self.summary()
        return budget_used_percent(summary.total_spent, self.budget.total)

    def remaining_budget(self, summary: Optional[Summary] = None) -> float:
        summary = summary or self.summary()
        return remaining_budget(summary.total_spent, self.budget.total)


def ensure_state(
    session_state: MutableMapping,
    loader: Callable[[], SeedData] = load_seed,
) -> DashboardState:
    """Return the session's :class:`DashboardState`, seeding it on first use."""
    state = session_state.get(SESSION_KEY)
    if state is None:
        state = DashboardState.from_seed(loader())
        session_state[SESSION_KEY] = state
    return state
