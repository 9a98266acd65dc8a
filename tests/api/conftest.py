"""
tests/api/conftest.py

Shared fixtures for API route tests.

The `client` fixture:
  - Patches the Postgres startup/shutdown calls so no database is required.
  - Overrides the get_db FastAPI dependency with an async generator mock.
  - Leaves require_api_key using the real implementation; tests that need
    an authenticated client send the default "changeme" key (matches
    settings.api_key default).
  - Clears dependency_overrides after each test to avoid cross-test leakage.
"""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from eventrooms.database.postgres import get_db
from eventrooms.main import app

# Default API key that matches settings.api_key default value.
VALID_API_KEY = "changeme"


async def _mock_get_db() -> AsyncMock:  # type: ignore[override]
    """Async generator override for the get_db dependency."""
    yield AsyncMock()


@pytest.fixture()
def client() -> TestClient:  # type: ignore[return]
    """
    Return a TestClient with the database dependency mocked.

    Yields inside a context manager so lifespan patches are active for the
    full duration of each test, and dependency_overrides are cleared on exit.
    """
    app.dependency_overrides[get_db] = _mock_get_db

    with (
        patch("eventrooms.main.init_postgres"),
        patch("eventrooms.main.close_postgres"),
    ):
        with TestClient(app, raise_server_exceptions=True) as c:
            yield c

    app.dependency_overrides.clear()
