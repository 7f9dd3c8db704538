from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from kondo.repositories.alert_repo import AlertRepository
from kondo.repositories.incident_repo import IncidentRepository
from kondo.repositories.profile_repo import ProfileRepository
from kondo.services.incident_service import IncidentService

FIXED_NOW = datetime(2025, 5, 10, 12, 0, tzinfo=timezone.utc)


class FakeQuery:
    """Imita el query builder de supabase-py sobre tablas en memoria."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.limit_n = None

    def select(self, columns="*"):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, data):
        self.op = "insert"
        self.payload = data
        return self

    def update(self, fields):
        self.op = "update"
        self.payload = fields
        return self

    def eq(self, column, value):
        self.filters.append(("eq", column, value))
        return self

    def in_(self, column, values):
        self.filters.append(("in", column, list(values)))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def _matches(self, row):
        for kind, column, value in self.filters:
            if kind == "eq" and row.get(column) != value:
                return False
            if kind == "in" and row.get(column) not in value:
                return False
        return True

    def execute(self):
        self.db.calls.append((self.table, self.op, list(self.filters)))
        error = self.db.errors.get((self.table, self.op))
        if error is not None:
            raise error

        rows = self.db.tables.setdefault(self.table, [])
        if self.op == "insert":
            row = self.db.new_row(self.table, self.payload)
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        matches = [row for row in rows if self._matches(row)]
        if self.op == "update":
            for row in matches:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matches])

        if self.order_by:
            column, desc = self.order_by
            matches = sorted(matches, key=lambda r: r.get(column) or "", reverse=desc)
        if self.limit_n is not None:
            matches = matches[: self.limit_n]
        if self.columns != "*":
            keys = [c.strip() for c in self.columns.split(",")]
            matches = [{k: row.get(k) for k in keys} for row in matches]
        return SimpleNamespace(data=[dict(row) for row in matches])


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.errors = {}
        self.calls = []
        self._counter = 0

    def table(self, name):
        return FakeQuery(self, name)

    def new_row(self, table, payload):
        self._counter += 1
        row = {
            "id": f"{table}-{self._counter}",
            "sequential_id": self._counter,
            "created_at": (datetime(2025, 5, 1, tzinfo=timezone.utc) + timedelta(minutes=self._counter)).isoformat(),
        }
        row.update(payload)
        return row

    def seed(self, table, **fields):
        row = self.new_row(table, fields)
        self.tables.setdefault(table, []).append(row)
        return row

    def mutations(self, table):
        return [call for call in self.calls if call[0] == table and call[1] in ("insert", "update")]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def incident_repository(fake_supabase):
    return IncidentRepository(fake_supabase)


@pytest.fixture
def alert_repository(fake_supabase):
    return AlertRepository(fake_supabase)


@pytest.fixture
def profile_repository(fake_supabase):
    return ProfileRepository(fake_supabase)


@pytest.fixture
def incident_service(incident_repository):
    return IncidentService(incident_repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def open_incident(fake_supabase):
    return fake_supabase.seed(
        "incidents",
        title="Leak",
        description="Water in hallway",
        user_id="u1",
        status="Aberto",
    )


@pytest.fixture
def responded_incident(fake_supabase):
    return fake_supabase.seed(
        "incidents",
        title="Broken gate",
        description="Garage gate stuck",
        user_id="u2",
        status="Respondido",
        response="Technician called",
        responded_at="2025-05-09T10:00:00+00:00",
    )
