import math
from datetime import date

import pytest

from expense_dashboard.models import ExpenseDraft
from expense_dashboard.validation import (
    FailureKind,
    ValidationFailure,
    parse_amount,
    validate_draft,
)

CATEGORIES = ['Groceries', 'Housing']


def _draft(**overrides):
    values = {
        'date': '2024-05-01',
        'category': 'Groceries',
        'merchant': 'Co-op',
        'amount': '12.50',
        'notes': '',
    }
    values.update(overrides)
    return ExpenseDraft(**values)


def _failure(draft, categories=None):
    with pytest.raises(ValidationFailure) as excinfo:
        validate_draft(draft, categories=categories, id_factory=lambda: 'x')
    return excinfo.value


def test_valid_draft_becomes_expense():
    expense = validate_draft(_draft(), categories=CATEGORIES, id_factory=lambda: 'new-id')

    assert expense.id == 'new-id'
    assert expense.date == date(2024, 5, 1)
    assert expense.category == 'Groceries'
    assert expense.merchant == 'Co-op'
    assert expense.amount == pytest.approx(12.50)
    assert expense.notes is None


def test_fields_are_trimmed():
    expense = validate_draft(_draft(merchant='  Co-op  ', amount=' 3 ', notes='  bread '))

    assert expense.merchant == 'Co-op'
    assert expense.amount == 3
    assert expense.notes == 'bread'


def test_default_ids_are_unique():
    first = validate_draft(_draft())
    second = validate_draft(_draft())
    assert first.id != second.id


def test_empty_merchant_is_missing_required_field():
    failure = _failure(_draft(merchant='   '))

    assert failure.kinds == [FailureKind.MISSING_REQUIRED_FIELD]
    assert failure.issues[0].field == 'merchant'


def test_every_missing_field_is_reported():
    failure = _failure(ExpenseDraft())

    assert [issue.field for issue in failure.issues] == ['date', 'category', 'merchant', 'amount']
    assert set(failure.kinds) == {FailureKind.MISSING_REQUIRED_FIELD}


@pytest.mark.parametrize('amount', ['abc', 'nan', 'inf', '-inf', '12,50'])
def test_non_numeric_amount(amount):
    failure = _failure(_draft(amount=amount))
    assert failure.kind == FailureKind.NON_NUMERIC_AMOUNT


@pytest.mark.parametrize('amount', ['-5', '0', '0.00'])
def test_non_positive_amount(amount):
    failure = _failure(_draft(amount=amount))
    assert failure.kind == FailureKind.NON_POSITIVE_AMOUNT


def test_invalid_date():
    failure = _failure(_draft(date='2024-02-30'))
    assert failure.kind == FailureKind.INVALID_DATE


def test_unknown_category_only_checked_when_categories_given():
    failure = _failure(_draft(category='Yachts'), categories=CATEGORIES)
    assert failure.kind == FailureKind.UNKNOWN_CATEGORY

    expense = validate_draft(_draft(category='Yachts'))
    assert expense.category == 'Yachts'


def test_messages_by_field():
    failure = _failure(_draft(merchant='', amount='-1'))
    messages = failure.messages_by_field()

    assert set(messages) == {'merchant', 'amount'}
    assert 'greater than zero' in messages['amount'][0]
    assert isinstance(failure, ValueError)


def test_parse_amount():
    assert parse_amount('12.5') == pytest.approx(12.5)
    assert parse_amount('1e2') == pytest.approx(100)
    assert math.isnan(parse_amount('twelve'))
