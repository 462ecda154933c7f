"""
Pytest configuration for inventory backend tests.

Sets up the test environment and provides two kinds of fake Supabase
client:
- supabase_client: MagicMock whose query builder chains back to itself,
  for asserting which filters a service applies
- memory_client: a small in-memory table store that understands the
  query builder calls the services make
"""
import itertools
import os
import re
from typing import Any, Dict, List, Optional

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-publishable-key")

QUERY_METHODS = (
    "select", "insert", "update", "upsert", "delete",
    "eq", "ilike", "order", "limit",
)


class MockSupabaseResponse:
    """Mock Supabase API response object."""
    def __init__(self, data: Any = None, count: Optional[int] = None):
        self.data = data
        self.count = count


def make_api_error(message: str = "boom", code: str = "XX000") -> APIError:
    return APIError({"message": message, "code": code, "details": None, "hint": None})


@pytest.fixture
def api_error():
    """Factory for postgrest APIError instances."""
    return make_api_error


@pytest.fixture
def response():
    """Factory for fake APIResponse objects."""
    return MockSupabaseResponse


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client.

    client.table(...) returns one query mock; every builder method returns
    that same mock, so tests configure query.execute and inspect calls on
    supabase_client.table.return_value.
    """
    mock_client = MagicMock()
    query = MagicMock()
    for name in QUERY_METHODS:
        getattr(query, name).return_value = query
    query.execute.return_value = MockSupabaseResponse(data=[])
    mock_client.table.return_value = query
    return mock_client


def _like_to_regex(pattern: str) -> "re.Pattern[str]":
    parts = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            parts.append(re.escape(next(chars, "\\")))
        elif ch == "%":
            parts.append(".*")
        elif ch == "_":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


class InMemoryQuery:
    """One PostgREST-style request against an InMemorySupabase table."""

    def __init__(self, store: "InMemorySupabase", table: str):
        self._store = store
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._on_conflict: Optional[str] = None
        self._filters: List[Any] = []
        self._order: Optional[tuple] = None
        self._limit: Optional[int] = None

    def select(self, *columns: str) -> "InMemoryQuery":
        return self

    def insert(self, payload: Any) -> "InMemoryQuery":
        self._op, self._payload = "insert", payload
        return self

    def update(self, payload: Dict[str, Any]) -> "InMemoryQuery":
        self._op, self._payload = "update", payload
        return self

    def upsert(self, payload: Any, on_conflict: str = "") -> "InMemoryQuery":
        self._op, self._payload, self._on_conflict = "upsert", payload, on_conflict
        return self

    def delete(self) -> "InMemoryQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "InMemoryQuery":
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def ilike(self, column: str, pattern: str) -> "InMemoryQuery":
        regex = _like_to_regex(pattern)
        self._filters.append(lambda row: regex.fullmatch(str(row.get(column, ""))) is not None)
        return self

    def order(self, column: str, desc: bool = False) -> "InMemoryQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "InMemoryQuery":
        self._limit = size
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(f(row) for f in self._filters)

    def execute(self) -> MockSupabaseResponse:
        if self._store.fail_next is not None:
            error, self._store.fail_next = self._store.fail_next, None
            raise error

        rows = self._store.tables.setdefault(self._table, [])
        payloads = self._payload if isinstance(self._payload, list) else [self._payload]

        if self._op == "insert":
            return MockSupabaseResponse(data=[self._store.add_row(self._table, p) for p in payloads])

        if self._op == "upsert":
            out = []
            for p in payloads:
                existing = [r for _, r in rows if r.get(self._on_conflict) == p.get(self._on_conflict)]
                if existing:
                    existing[0].update(p)
                    out.append(dict(existing[0]))
                else:
                    out.append(self._store.add_row(self._table, p))
            return MockSupabaseResponse(data=out)

        if self._op == "update":
            matched = [r for _, r in rows if self._matches(r)]
            for r in matched:
                r.update(self._payload)
            return MockSupabaseResponse(data=[dict(r) for r in matched])

        if self._op == "delete":
            removed = [r for _, r in rows if self._matches(r)]
            self._store.tables[self._table] = [(s, r) for s, r in rows if not self._matches(r)]
            return MockSupabaseResponse(data=[dict(r) for r in removed])

        selected = [(s, r) for s, r in rows if self._matches(r)]
        if self._order:
            column, desc = self._order
            selected.sort(key=lambda sr: (str(sr[1].get(column) or ""), sr[0]), reverse=desc)
        data = [dict(r) for _, r in selected]
        if self._limit is not None:
            data = data[:self._limit]
        return MockSupabaseResponse(data=data)


class InMemorySupabase:
    """Tables as lists of (insert sequence, row) pairs."""

    def __init__(self):
        self.tables: Dict[str, List[tuple]] = {}
        self.fail_next: Optional[APIError] = None
        self._seq = itertools.count(1)
        self._ids: Dict[str, Any] = {}

    def table(self, name: str) -> InMemoryQuery:
        return InMemoryQuery(self, name)

    def add_row(self, table: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        row = dict(payload)
        if "id" not in row:
            ids = self._ids.setdefault(table, itertools.count(1))
            row["id"] = next(ids)
        self.tables.setdefault(table, []).append((next(self._seq), row))
        return dict(row)

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return [dict(r) for _, r in self.tables.get(table, [])]


@pytest.fixture
def memory_client():
    return InMemorySupabase()
