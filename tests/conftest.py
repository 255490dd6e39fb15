# tests/conftest.py

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Load .env variables like SUPABASE keys
load_dotenv()

from app.main import app  # noqa: E402

# ------------- Global Fixtures ------------------


@pytest.fixture
def api_client():
    """
    FastAPI test client. Dependency overrides are cleared after each test.
    """
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
