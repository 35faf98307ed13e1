"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at an in-memory collection store before anything reads settings.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["MEALDB_BASE_URL"] = "https://mealdb.test/api/json/v1/1"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clean_store():
    """Every test starts with empty collections and no open recipe API client."""
    from adapters import mealdb_adapter
    from domain.models import SessionLocal, init_database
    from repositories import clear_all_data

    init_database()
    yield
    db = SessionLocal()
    try:
        clear_all_data(db)
    finally:
        db.close()
    mealdb_adapter.close()
