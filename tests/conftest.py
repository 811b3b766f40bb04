import pytest

from expense_dashboard.models import CategoryDefinition, MonthlyBudget
from expense_dashboard.seed import load_seed


@pytest.fixture
def seed():
    return load_seed()


@pytest.fixture
def budget():
    return MonthlyBudget(
        total=1000,
        categories=(
            CategoryDefinition('Groceries', 300),
            CategoryDefinition('Housing', 500),
            CategoryDefinition('Fun', 0),
        ),
    )
