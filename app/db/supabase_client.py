# app/db/supabase_client.py
from app.config import settings
from supabase import Client, create_client


def get_supabase_client_for_user(jwt: str) -> Client:
    client = create_client(settings.SUPABASE_PROJECT_URL, settings.SUPABASE_ANON_KEY)

    # Manually inject the Authorization header for RLS
    client.postgrest.auth(jwt)

    return client


# Service role client. Bypasses RLS, only for privileged work and fixtures.
def get_supabase_service_client() -> Client:
    return create_client(settings.SUPABASE_PROJECT_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
