"""Top-level package for the Expense Dashboard.

The primary modules are:

* ``aggregation`` – totals, budget utilization and category filtering
* ``validation`` – quick-add draft validation
* ``store`` – the in-memory expense store
* ``state`` – per-session state owned by the Streamlit app
* ``dashboard`` – the Streamlit app that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run expense_dashboard/dashboard.py
```
"""

from . import aggregation  # noqa: F401  # re-exported for convenience
from . import validation  # noqa: F401  # re-exported for convenience
from .aggregation import summarize
from .models import (
    BudgetUsage,
    CategoryDefinition,
    Expense,
    ExpenseDraft,
    MonthlyBudget,
    RecurringPayment,
    Summary,
)
from .store import ExpenseStore
from .validation import FailureKind, ValidationFailure, validate_draft

__all__ = [
    "aggregation",
    "validation",
    "summarize",
    "BudgetUsage",
    "CategoryDefinition",
    "Expense",
    "ExpenseDraft",
    "MonthlyBudget",
    "RecurringPayment",
    "Summary",
    "ExpenseStore",
    "FailureKind",
    "ValidationFailure",
    "validate_draft",
]
