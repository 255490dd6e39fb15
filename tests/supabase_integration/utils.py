import os
from datetime import datetime, timezone

import httpx

SUPABASE_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

TEST_EMAIL_DOMAIN = "@example.com"
TEST_PASSWORD = "TestPass123"
TEST_COURSE_TITLE = "Test Course"
USERS_PAGE_SIZE = 100


def headers_template(token):
    return {
        "Authorization": f"Bearer {token}",
        "apikey": SUPABASE_ANON_KEY,
        "Content-Type": "application/json",
        "Prefer": "return=representation",
    }


def create_test_user(supabase_admin, email):
    user = supabase_admin.auth.admin.create_user({"email": email, "password": TEST_PASSWORD, "email_confirm": True}).user
    return user.id


def login_as_user(email):
    """Password grant against Supabase Auth. Returns the user's access token."""
    resp = httpx.post(
        f"{SUPABASE_URL}/auth/v1/token?grant_type=password",
        headers={"apikey": SUPABASE_ANON_KEY, "Content-Type": "application/json"},
        json={"email": email, "password": TEST_PASSWORD},
    )
    assert resp.status_code == 200, f"Login failed: {resp.text}"
    return resp.json()["access_token"]


def create_test_course(supabase_admin, title=TEST_COURSE_TITLE):
    response = supabase_admin.table("courses").insert({"title": title, "active": True}).execute()
    return response.data[0]["id"]


# Likes a course through the service role client (bypasses RLS)
def like_course_with_service_client(supabase_admin, user_id, course_id):
    now = datetime.now(timezone.utc).isoformat()
    supabase_admin.table("courses_likes").insert({"user_id": user_id, "course_id": course_id, "created_at": now, "updated_at": now}).execute()


def select_likes(client, user_id, course_id):
    return client.table("courses_likes").select("*").eq("user_id", user_id).eq("course_id", course_id).execute().data


def list_test_user_ids(supabase_admin, per_page=USERS_PAGE_SIZE):
    """Ids of every @example.com auth user, across all pages."""
    user_ids = []
    page = 1
    while True:
        users = supabase_admin.auth.admin.list_users(page=page, per_page=per_page)
        if not users:
            return user_ids
        user_ids.extend(user.id for user in users if user.email and user.email.endswith(TEST_EMAIL_DOMAIN))
        page += 1


def clear_test_data(supabase_admin):
    """Removes Test Course rows, their likes and every @example.com user."""
    courses = supabase_admin.table("courses").select("id").eq("title", TEST_COURSE_TITLE).execute().data
    course_ids = [c["id"] for c in courses]
    if course_ids:
        supabase_admin.table("courses_likes").delete().in_("course_id", course_ids).execute()
        supabase_admin.table("courses").delete().in_("id", course_ids).execute()

    user_ids = list_test_user_ids(supabase_admin)
    if user_ids:
        # Profile rows reference auth users, so they go first.
        supabase_admin.table("users").delete().in_("auth_user_id", user_ids).execute()
        for user_id in user_ids:
            supabase_admin.auth.admin.delete_user(user_id)
