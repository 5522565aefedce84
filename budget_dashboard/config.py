"""Configuration management for the budget dashboard.

This module centralizes all configuration values including the Gateway
location, request defaults, and environment variable overrides.  A ``.env``
file found from the current working directory is loaded first so local
development does not need exported variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_dotenv_path = find_dotenv(usecwd=True)
if _dotenv_path:
    load_dotenv(dotenv_path=_dotenv_path, override=False)

# Base package directory - assumes this file is in budget_dashboard/
_PACKAGE_DIR = Path(__file__).parent.resolve()

# Remote data service
API_URL = os.getenv("BUDGET_API_URL", "http://localhost:8081/api").rstrip("/")
API_TIMEOUT = float(os.getenv("BUDGET_API_TIMEOUT", "20"))

# Static assets
ASSETS_DIR = _PACKAGE_DIR / "assets"
DEFAULT_AVATAR_PATH = Path(
    os.getenv("BUDGET_DEFAULT_AVATAR", ASSETS_DIR / "default-avatar.svg")
).resolve()

# Session state keys shared between pages
TOKEN_SESSION_KEY = "auth_token"
VIEW_STATE_SESSION_KEY = "expense_view_state"

# Expense table columns that can be sorted, in display order
SORTABLE_FIELDS = ("name", "category", "amount")
FIELD_LABELS = {"name": "Name", "category": "Category", "amount": "Amount"}

# Chart colours
SPENT_COLOR = "rgba(255, 99, 132, 0.8)"
REMAINING_COLOR = "rgba(75, 192, 192, 0.8)"
BUDGET_COLOR = "rgba(54, 162, 235, 0.8)"
CATEGORY_COLORS = [
    "rgba(255, 99, 132, 0.8)",
    "rgba(54, 162, 235, 0.8)",
    "rgba(255, 206, 86, 0.8)",
    "rgba(75, 192, 192, 0.8)",
    "rgba(153, 102, 255, 0.8)",
    "rgba(255, 159, 64, 0.8)",
]


def get_api_url() -> str:
    """Get the Gateway base URL, re-reading the environment."""
    return os.getenv("BUDGET_API_URL", API_URL).rstrip("/")


def get_api_timeout() -> float:
    """Get the per-request timeout in seconds, re-reading the environment."""
    return float(os.getenv("BUDGET_API_TIMEOUT", API_TIMEOUT))
