"""Seed data loader.

The dashboard starts every session from a JSON file holding the monthly
budget, the initial expenses and the upcoming recurring payments.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import pandas as pd

from .config import SEED_PATH
from .logging_config import get_logger
from .models import CategoryDefinition, Expense, MonthlyBudget, RecurringPayment

logger = get_logger(__name__)


class SeedDataError(ValueError):
    """Raised when the seed file is missing fields or holds bad values."""


@dataclass(frozen=True)
class SeedData:
    budget: MonthlyBudget
    expenses: Tuple[Expense, ...]
    recurring: Tuple[RecurringPayment, ...]


def _parse_date(value: Any, context: str) -> date:
    parsed = pd.to_datetime(value, format='%Y-%m-%d', errors='coerce')
    if pd.isna(parsed):
        raise SeedDataError(f"Invalid date {value!r} in {context}")
    return parsed.date()


def _parse_amount(value: Any, context: str) -> float:
    if value is None or isinstance(value, (bool, list, dict)):
        raise SeedDataError(f"Invalid amount {value!r} in {context}")
    amount = pd.to_numeric(value, errors='coerce')
    if pd.isna(amount):
        raise SeedDataError(f"Invalid amount {value!r} in {context}")
    return float(amount)


def _require(value: Any, kind: type, context: str) -> Any:
    if not isinstance(value, kind):
        expected = 'an object' if kind is dict else 'a list'
        raise SeedDataError(f"{context} must be {expected}, got {type(value).__name__}")
    return value


def _parse_budget(data: Any) -> MonthlyBudget:
    _require(data, dict, 'budget')
    categories = []
    for entry in _require(data.get('categories', []), list, 'budget categories'):
        _require(entry, dict, 'budget category')
        name = str(entry.get('name') or '').strip()
        if not name:
            raise SeedDataError("Budget category without a name")
        categories.append(CategoryDefinition(name=name, allocated=_parse_amount(entry.get('allocated', 0), f"category '{name}'")))
    names = [definition.name for definition in categories]
    if len(names) != len(set(names)):
        raise SeedDataError("Budget categories must be unique")
    return MonthlyBudget(total=_parse_amount(data.get('total', 0), 'budget total'), categories=tuple(categories))


def _parse_expense(entry: Any) -> Expense:
    _require(entry, dict, 'expense entry')
    try:
        expense_id = str(entry['id'])
        context = f"expense '{expense_id}'"
        return Expense(
            id=expense_id,
            date=_parse_date(entry['date'], context),
            category=str(entry['category']),
            merchant=str(entry['merchant']),
            amount=_parse_amount(entry['amount'], context),
            notes=(str(entry.get('notes') or '').strip() or None),
        )
    except KeyError as exc:
        raise SeedDataError(f"Expense entry missing field {exc}") from exc


def _parse_recurring(entry: Any) -> RecurringPayment:
    _require(entry, dict, 'recurring payment entry')
    try:
        payment_id = str(entry['id'])
        context = f"recurring payment '{payment_id}'"
        return RecurringPayment(
            id=payment_id,
            title=str(entry['title']),
            amount=_parse_amount(entry['amount'], context),
            next_due=_parse_date(entry['next_due'], context),
            category=str(entry['category']),
        )
    except KeyError as exc:
        raise SeedDataError(f"Recurring payment entry missing field {exc}") from exc


def parse_seed(data: Dict[str, Any]) -> SeedData:
    """Build :class:`SeedData` from an already decoded JSON document."""
    if not isinstance(data, dict):
        raise SeedDataError("Seed data must be a JSON object")
    budget = _parse_budget(data.get('budget', {}))
    expenses = tuple(_parse_expense(entry) for entry in _require(data.get('expenses', []), list, 'expenses'))
    ids = [expense.id for expense in expenses]
    if len(ids) != len(set(ids)):
        raise SeedDataError("Seed expense ids must be unique")
    recurring = tuple(_parse_recurring(entry) for entry in _require(data.get('recurring', []), list, 'recurring'))
    return SeedData(budget=budget, expenses=expenses, recurring=recurring)


def load_seed(path: Optional[Path] = None) -> SeedData:
    """Load seed data from ``path`` (defaults to the configured seed file).

    Raises:
        FileNotFoundError: If the seed file does not exist.
        SeedDataError: If the file is not valid seed JSON.
    """
    target = Path(path) if path is not None else SEED_PATH
    if not target.exists():
        raise FileNotFoundError(f"Seed file not found: {target}")
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Seed file {target} is not valid JSON: {exc}") from exc

    seed = parse_seed(data)
    logger.info(
        "seed_loaded",
        path=str(target),
        expenses=len(seed.expenses),
        categories=len(seed.budget.categories),
        recurring=len(seed.recurring),
    )
    return seed
