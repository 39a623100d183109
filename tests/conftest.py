"""
Pytest configuration and fixtures for Tavvy Pros tests.
"""

import copy
import os
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

# Set test environment before importing tavvy_pros modules
os.environ["SUPABASE_URL"] = "https://test.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-service-role-key"
os.environ["TAVVY_ENV"] = "development"

from onboarding.state import LocationType, ProviderType, WizardState, WizardStep


@pytest.fixture
def mock_supabase():
    """Mock Supabase client for unit tests."""
    mock_client = MagicMock()

    # Mock table operations
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.update.return_value = mock_table
    mock_table.upsert.return_value = mock_table
    mock_table.delete.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    mock_client.table.return_value = mock_table

    return mock_client


# =============================================================================
# In-memory Supabase
# =============================================================================

@dataclass
class FakeResponse:
    data: list
    count: int | None = None


class FakeQuery:
    """Chainable query against FakeSupabase tables (the subset the app uses)."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload = None
        self.on_conflict = None
        self.filters: list[tuple[str, object]] = []
        self.limit_n: int | None = None

    def select(self, columns: str = "*", count: str | None = None):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, payload: dict):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload: dict):
        self.op = "update"
        self.payload = payload
        return self

    def upsert(self, payload: dict, on_conflict: str = "id"):
        self.op = "upsert"
        self.payload = payload
        self.on_conflict = on_conflict
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column: str, value):
        self.filters.append((column, value))
        return self

    def limit(self, n: int):
        self.limit_n = n
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(col) == val for col, val in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table, self.op, copy.deepcopy(self.payload)))
        if (self.table, self.op) in self.db.failures:
            raise Exception(f"{self.table}.{self.op} failed")

        rows = self.db.tables.setdefault(self.table, [])

        if self.op == "select":
            found = [copy.deepcopy(r) for r in rows if self._matches(r)]
            if self.limit_n is not None:
                found = found[: self.limit_n]
            if "places(" in self.columns:
                for row in found:
                    row["places"] = self.db.get("places", row.get("place_id"))
            return FakeResponse(data=found, count=len(found))

        if self.op == "insert":
            row = copy.deepcopy(self.payload)
            row.setdefault("id", self.db.next_id(self.table))
            rows.append(row)
            return FakeResponse(data=[copy.deepcopy(row)])

        if self.op == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self.payload))
                    updated.append(copy.deepcopy(row))
            return FakeResponse(data=updated)

        if self.op == "upsert":
            key = self.payload.get(self.on_conflict)
            for row in rows:
                if row.get(self.on_conflict) == key:
                    row.update(copy.deepcopy(self.payload))
                    return FakeResponse(data=[copy.deepcopy(row)])
            row = copy.deepcopy(self.payload)
            row.setdefault("id", self.db.next_id(self.table))
            rows.append(row)
            return FakeResponse(data=[copy.deepcopy(row)])

        if self.op == "delete":
            kept = [r for r in rows if not self._matches(r)]
            deleted = [r for r in rows if self._matches(r)]
            self.db.tables[self.table] = kept
            return FakeResponse(data=deleted)

        raise ValueError(f"Unsupported op {self.op}")


class FakeSupabase:
    """
    In-memory stand-in for the Supabase client.

    Set `failures` to {(table, op), ...} to make those calls raise.
    """

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.calls: list[tuple[str, str, dict | None]] = []
        self.failures: set[tuple[str, str]] = set()
        self._ids = 0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_id(self, table: str) -> str:
        self._ids += 1
        return f"{table}-{self._ids}"

    def get(self, table: str, row_id) -> dict | None:
        for row in self.tables.get(table, []):
            if row.get("id") == row_id:
                return copy.deepcopy(row)
        return None

    def calls_to(self, table: str, op: str | None = None) -> list[dict | None]:
        return [p for t, o, p in self.calls if t == table and (op is None or o == op)]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


# =============================================================================
# Sample State
# =============================================================================

@pytest.fixture
def plumber_state():
    """A fully filled-in plumber profile sitting on the review step."""
    return WizardState(
        provider_type=ProviderType.PRO,
        primary_category="Plumbing",
        selected_subcategories=["Drain Services", "Water Heater"],
        business_name="AB Plumbing",
        phone="(555) 123-4567",
        email="hello@abplumbing.com",
        website="https://abplumbing.com",
        year_established="2009",
        location_type=LocationType.FIXED,
        address="12 Main St",
        city="Austin",
        state="TX",
        zip_code="78701",
        services=[
            {"name": "Drain Cleaning", "description": "", "price_type": "fixed", "price_min": 150.0, "price_max": None},
            {"name": "Water Heater Install", "description": "Tank or tankless", "price_type": "range", "price_min": 800.0, "price_max": 2500.0},
            {"name": "Leak Repair", "description": "", "price_type": "quote", "price_min": None, "price_max": None},
        ],
        profile_photo="https://cdn.example.com/logo.png",
        cover_photo="https://cdn.example.com/cover.png",
        work_photos=["https://cdn.example.com/1.png", "https://cdn.example.com/2.png", "https://cdn.example.com/3.png"],
        highlights=["licensed", "insured"],
        license_number="M-12345",
        license_state="TX",
        short_bio="Family plumbers serving Austin since 2009.",
        full_description="Drains, water heaters and everything in between.",
        current_step=int(WizardStep.REVIEW),
    )


@pytest.fixture
def user_id():
    return "user-123"
