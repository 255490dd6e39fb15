from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from app.db.exceptions import DatabaseError, RowLevelSecurityError, UniqueViolationError
from postgrest.exceptions import APIError

TABLE = "courses_likes"

# Postgres error codes surfaced by PostgREST
INSUFFICIENT_PRIVILEGE = "42501"
UNIQUE_VIOLATION = "23505"


def _wrap_api_error(action: str, e: APIError) -> DatabaseError:
    if e.code == INSUFFICIENT_PRIVILEGE:
        return RowLevelSecurityError(f"Error {action}: {e.message}")
    if e.code == UNIQUE_VIOLATION:
        return UniqueViolationError(f"Error {action}: {e.message}")
    return DatabaseError(f"Error {action}: {e.message}")


class CoursesLikesDAL:
    # Data Access Control: the client decides which policy applies.
    # A user-scoped client is filtered by RLS, the service role client is not.
    def __init__(self, client):
        self.client = client

    # Lists likes matching the given filters, as visible to the client.
    def get_likes(self, user_id: Optional[UUID] = None, course_id: Optional[UUID] = None) -> list[dict]:
        try:
            query = self.client.table(TABLE).select("*")
            if user_id is not None:
                query = query.eq("user_id", str(user_id))
            if course_id is not None:
                query = query.eq("course_id", str(course_id))
            response = query.execute()
            return response.data or []
        except APIError as e:
            raise _wrap_api_error("fetching likes", e)
        except Exception as e:
            raise DatabaseError(f"Error fetching likes: {e}")

    # Retrieves a single like, if visible to the client.
    def find_like(self, user_id: UUID, course_id: UUID) -> Optional[dict]:
        try:
            response = self.client.table(TABLE).select("*").eq("user_id", str(user_id)).eq("course_id", str(course_id)).limit(1).execute()
            if not response.data:
                return None
            return response.data[0]
        except APIError as e:
            raise _wrap_api_error("fetching like", e)
        except Exception as e:
            raise DatabaseError(f"Error fetching like: {e}")

    # Inserts a like for user_id on course_id.
    def insert_like(self, user_id: UUID, course_id: UUID) -> dict:
        now = datetime.now(timezone.utc).isoformat()
        new_like = {"user_id": str(user_id), "course_id": str(course_id), "created_at": now, "updated_at": now}

        try:
            response = self.client.table(TABLE).insert(new_like).execute()
        except APIError as e:
            raise _wrap_api_error("inserting like", e)
        except Exception as e:
            raise DatabaseError(f"Error inserting like: {e}")

        if not response.data:
            raise DatabaseError("Insert returned empty data")
        return response.data[0]

    # Deletes likes for user_id on course_id. Returns the number of rows removed.
    def delete_likes(self, user_id: UUID, course_id: UUID) -> int:
        try:
            response = self.client.table(TABLE).delete().eq("user_id", str(user_id)).eq("course_id", str(course_id)).execute()
            return len(response.data or [])
        except APIError as e:
            raise _wrap_api_error("deleting likes", e)
        except Exception as e:
            raise DatabaseError(f"Error deleting likes: {e}")
