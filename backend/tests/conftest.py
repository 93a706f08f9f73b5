"""Test fixtures: in-memory SQLite store + FastAPI TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flightmon.config import Settings
from flightmon.db.store import TelemetryStore
from flightmon.main import create_app
from flightmon.services.telemetry_service import TelemetryService


@pytest.fixture()
def store():
    """Fresh in-memory store per test, tables created."""
    s = TelemetryStore.from_url("sqlite://")
    s.init_schema(max_retries=1, retry_delay=0)
    yield s
    s.close()


@pytest.fixture()
def service(store: TelemetryStore) -> TelemetryService:
    return TelemetryService(store)


@pytest.fixture()
def client(store: TelemetryStore):
    app = create_app(Settings(database_url="sqlite://"), store=store)
    with TestClient(app) as c:
        yield c
