"""Configuration management for the expense dashboard.

This module centralizes configuration values including the seed data
location, logging options and display constants.  Environment variables
override the defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

# Package directory - assumes this file is in expense_dashboard/
_PACKAGE_DIR = Path(__file__).parent.resolve()

# Seed data shown when a session starts
SEED_PATH = Path(
    os.getenv("EXPENSE_DASHBOARD_SEED_PATH", _PACKAGE_DIR / "data" / "seed.json")
).resolve()

# Logging
LOG_LEVEL = os.getenv("EXPENSE_DASHBOARD_LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("EXPENSE_DASHBOARD_LOG_JSON", "0").strip().lower() in {"1", "true", "yes"}

# Filter sentinel that disables category filtering
ALL_CATEGORIES = "All"

# The overall "budget used" card never shows more than this percentage
BUDGET_USED_DISPLAY_CAP = 999

CURRENCY_SYMBOL = "$"
EMPTY_NOTES_PLACEHOLDER = "—"
