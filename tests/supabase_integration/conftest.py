# tests/supabase_integration/conftest.py
#
# Live tests against a Supabase project. They are only collected when the
# project URL and both keys are configured.

import pytest
from app.config import settings
from app.db.supabase_client import get_supabase_client_for_user, get_supabase_service_client

from tests.supabase_integration.utils import clear_test_data, create_test_course, create_test_user, login_as_user

if not settings.has_supabase_credentials():
    collect_ignore_glob = ["test_*.py"]


@pytest.fixture(scope="module")
def supabase_admin():
    """
    Supabase admin client using the service role key.
    Use this for setup/cleanup that bypasses RLS.
    """
    return get_supabase_service_client()


@pytest.fixture(autouse=True)
def clean_test_data(supabase_admin):
    clear_test_data(supabase_admin)
    yield
    clear_test_data(supabase_admin)


@pytest.fixture
def make_user(supabase_admin):
    """
    Creates a confirmed user and logs them in.
    Returns a dict with their id, email, token and a user-scoped client.
    """

    def _make_user(name):
        email = f"{name}@example.com"
        user_id = create_test_user(supabase_admin, email)
        token = login_as_user(email)
        return {"id": user_id, "email": email, "token": token, "client": get_supabase_client_for_user(token)}

    return _make_user


@pytest.fixture
def test_course(supabase_admin):
    return create_test_course(supabase_admin)
