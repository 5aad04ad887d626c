import os

# Settings are read at import time
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE", "service-role-key")

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from skillmatch.main import app
from skillmatch.api.deps import get_auth_client
from skillmatch.db.session import get_db

AUTH_USER_ID = "11111111-1111-1111-1111-111111111111"
AUTH_HEADERS = {"Authorization": "Bearer good-token"}


def make_result(scalars=None, rows=None, one=None):
    """Build a mock of what ``await session.execute(...)`` returns."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = scalars or []
    result.scalars.return_value.first.return_value = (scalars or [None])[0]
    result.all.return_value = rows or []
    result.scalar_one_or_none.return_value = one
    return result


@pytest.fixture
def mock_session():
    session = AsyncMock()

    # Configure session.execute to return an empty result when awaited
    session.execute.side_effect = None
    session.execute.return_value = make_result()

    # Configure session.get to return None by default
    session.get.return_value = None

    # Standard methods
    session.add = MagicMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()

    return session


@pytest.fixture
def mock_auth_client():
    client = MagicMock()
    client.get_user = AsyncMock(return_value={"id": AUTH_USER_ID, "email": "user@example.com"})
    return client


@pytest.fixture
def client(mock_session, mock_auth_client):
    """TestClient with the storage session and auth client replaced by mocks."""
    async def override_get_db():
        yield mock_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_client] = lambda: mock_auth_client
    yield TestClient(app)
    app.dependency_overrides.clear()
