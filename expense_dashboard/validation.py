"""Quick-add validation.

Turns the raw text of the quick-add form into an :class:`Expense`.  Every
failing field is collected into a single :class:`ValidationFailure` so the
form can show all problems at once.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .models import Expense, ExpenseDraft

REQUIRED_FIELDS = ('date', 'category', 'merchant', 'amount')


class FailureKind(str, Enum):
    MISSING_REQUIRED_FIELD = 'missing-required-field'
    NON_NUMERIC_AMOUNT = 'non-numeric-amount'
    NON_POSITIVE_AMOUNT = 'non-positive-amount'
    INVALID_DATE = 'invalid-date'
    UNKNOWN_CATEGORY = 'unknown-category'


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    kind: FailureKind
    message: str


class ValidationFailure(ValueError):
    """Raised when a quick-add draft cannot become an expense."""

    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__('; '.join(issue.message for issue in self.issues) or 'Invalid expense')

    @property
    def kinds(self) -> List[FailureKind]:
        return [issue.kind for issue in self.issues]

    @property
    def kind(self) -> Optional[FailureKind]:
        """The first failure kind, if any."""
        return self.issues[0].kind if self.issues else None

    def messages_by_field(self) -> dict:
        messages: dict = {}
        for issue in self.issues:
            messages.setdefault(issue.field, []).append(issue.message)
        return messages


def new_expense_id() -> str:
    return str(uuid.uuid4())


def parse_amount(text: str) -> float:
    """Parse amount text, returning NaN for anything that is not a finite number."""
    value = pd.to_numeric(text.strip(), errors='coerce')
    if pd.isna(value) or not np.isfinite(value):
        return float('nan')
    return float(value)


def _check_amount(text: str, issues: List[ValidationIssue]) -> Optional[float]:
    amount = parse_amount(text)
    if np.isnan(amount):
        issues.append(ValidationIssue('amount', FailureKind.NON_NUMERIC_AMOUNT, f"Amount '{text}' is not a number."))
        return None
    if amount <= 0:
        issues.append(ValidationIssue('amount', FailureKind.NON_POSITIVE_AMOUNT, 'Amount must be greater than zero.'))
        return None
    return amount


def _check_date(text: str, issues: List[ValidationIssue]):
    parsed = pd.to_datetime(text, format='%Y-%m-%d', errors='coerce')
    if pd.isna(parsed):
        issues.append(ValidationIssue('date', FailureKind.INVALID_DATE, f"Date '{text}' is not a valid YYYY-MM-DD date."))
        return None
    return parsed.date()


def validate_draft(
    draft: ExpenseDraft,
    categories: Optional[Sequence[str]] = None,
    id_factory: Callable[[], str] = new_expense_id,
) -> Expense:
    """Validate a quick-add draft and build the expense it describes.

    Args:
        draft: Raw form values.
        categories: Valid category names.  When omitted any non-empty
            category is accepted.
        id_factory: Produces the id of the new expense.

    Returns:
        The new expense with trimmed fields and ``notes`` set to ``None``
        when blank.

    Raises:
        ValidationFailure: If any field is missing or malformed.
    """
    values = {name: (getattr(draft, name) or '').strip() for name in REQUIRED_FIELDS}
    notes = (draft.notes or '').strip()
    issues: List[ValidationIssue] = []

    for name in REQUIRED_FIELDS:
        if not values[name]:
            issues.append(
                ValidationIssue(name, FailureKind.MISSING_REQUIRED_FIELD, f"{name.capitalize()} is required.")
            )

    expense_date = _check_date(values['date'], issues) if values['date'] else None
    amount = _check_amount(values['amount'], issues) if values['amount'] else None

    if values['category'] and categories is not None and values['category'] not in categories:
        issues.append(
            ValidationIssue(
                'category',
                FailureKind.UNKNOWN_CATEGORY,
                f"Category '{values['category']}' is not one of: {', '.join(categories)}.",
            )
        )

    if issues:
        raise ValidationFailure(issues)

    return Expense(
        id=id_factory(),
        date=expense_date,
        category=values['category'],
        merchant=values['merchant'],
        amount=amount,
        notes=notes or None,
    )
