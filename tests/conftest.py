"""
Pytest configuration and fixtures
"""
import io
import os
from types import SimpleNamespace

import pandas as pd
import pytest

# Testing environment must be set before config is first read
os.environ["FLASK_ENV"] = "testing"
os.environ.pop("SUPABASE_URL", None)
os.environ.pop("SUPABASE_SERVICE_ROLE_KEY", None)

from app import create_app  # noqa: E402
from config import get_config  # noqa: E402
from services import reset_supabase  # noqa: E402


class FakeQuery:
    """Mimics the postgrest select/order/range/execute chain."""

    def __init__(self, backend, table):
        self.backend = backend
        self.table = table
        self.start = None
        self.end = None
        self.payload = None

    def select(self, columns):
        self.backend.selects.append(columns)
        return self

    def order(self, column, desc=False):
        self.backend.orders.append((column, desc))
        return self

    def range(self, start, end):
        self.start, self.end = start, end
        return self

    def upsert(self, rows, on_conflict=""):
        self.payload = rows
        self.backend.upserts.append((self.table, rows, on_conflict))
        return self

    def execute(self):
        if self.backend.error is not None:
            raise self.backend.error
        if self.payload is not None:
            return SimpleNamespace(data=self.payload)
        self.backend.ranges.append((self.start, self.end))
        rows = self.backend.rows.get(self.table, [])
        return SimpleNamespace(data=rows[self.start:self.end + 1])


class FakeSupabase:
    def __init__(self, rows=None, error=None):
        self.rows = rows or {}
        self.error = error
        self.tables = []
        self.selects = []
        self.orders = []
        self.ranges = []
        self.upserts = []

    def table(self, name):
        self.tables.append(name)
        return FakeQuery(self, name)


def make_workbook(frame: pd.DataFrame) -> bytes:
    buffer = io.BytesIO()
    frame.to_excel(buffer, index=False, engine="openpyxl")
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def clean_state():
    reset_supabase()
    get_config.cache_clear()
    yield
    reset_supabase()
    get_config.cache_clear()


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_supabase():
    return FakeSupabase


@pytest.fixture
def inventory_rows():
    return [
        {"id": "1", "serial_number": "SN1", "product_name": "Dashcam", "status": "In Stock", "qc_result": "Pass"},
        {"id": "2", "serial_number": "SN2", "product_name": "Dashcam", "status": "In Stock", "qc_result": "Fail"},
        {"id": "3", "serial_number": "SN3", "product_name": "Dashcam", "status": "Dispatched", "qc_result": "Pass"},
        {"id": "4", "serial_number": "SN4", "product_name": "MDVR", "status": "In Stock", "qc_result": None},
        {"id": "5", "serial_number": "SN5", "product_name": "MDVR", "status": "In Stock", "qc_result": "Pending"},
        {"id": "6", "serial_number": "SN6", "product_name": None, "status": "Returned", "qc_result": ""},
    ]
