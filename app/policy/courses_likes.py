"""
Row ownership policy for the courses_likes table.

Mirrors the RLS policy Supabase applies to courses_likes, so the same rules
hold when the service runs against a store that has no RLS of its own:

- read:   an ordinary caller only ever sees rows with their own user_id.
          Other rows are filtered out, the query itself never fails.
- insert: an ordinary caller may only insert rows naming their own user_id.
          Anything else is rejected with RowLevelSecurityError.
- delete: an ordinary caller only removes their own rows. Deleting someone
          else's row matches zero rows and raises nothing.

A privileged caller (service role) bypasses all three.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from app.db.exceptions import RowLevelSecurityError
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Caller:
    user_id: Optional[str] = None
    privileged: bool = False

    @classmethod
    def user(cls, user_id) -> "Caller":
        return cls(user_id=str(user_id))

    @classmethod
    def service(cls) -> "Caller":
        return cls(privileged=True)

    def owns(self, user_id) -> bool:
        return self.user_id is not None and str(user_id) == self.user_id


class CoursesLikesPolicy:
    def can_read(self, caller: Caller, row: dict) -> bool:
        return caller.privileged or caller.owns(row.get("user_id"))

    def filter_rows(self, caller: Caller, rows: Iterable[dict]) -> list[dict]:
        return [row for row in rows if self.can_read(caller, row)]

    def check_insert(self, caller: Caller, row: dict) -> None:
        if caller.privileged or caller.owns(row.get("user_id")):
            return
        raise RowLevelSecurityError('new row violates row-level security policy for table "courses_likes"')

    def can_delete(self, caller: Caller, user_id) -> bool:
        return caller.privileged or caller.owns(user_id)


class PolicyEnforcedLikesDAL:
    """Applies CoursesLikesPolicy to every call before it reaches the wrapped DAL."""

    def __init__(self, dal, caller: Caller, policy: Optional[CoursesLikesPolicy] = None):
        self.dal = dal
        self.caller = caller
        self.policy = policy or CoursesLikesPolicy()

    def get_likes(self, user_id: Optional[UUID] = None, course_id: Optional[UUID] = None) -> list[dict]:
        rows = self.dal.get_likes(user_id=user_id, course_id=course_id)
        return self.policy.filter_rows(self.caller, rows)

    def find_like(self, user_id: UUID, course_id: UUID) -> Optional[dict]:
        row = self.dal.find_like(user_id=user_id, course_id=course_id)
        if row is None or not self.policy.can_read(self.caller, row):
            return None
        return row

    def insert_like(self, user_id: UUID, course_id: UUID) -> dict:
        try:
            self.policy.check_insert(self.caller, {"user_id": str(user_id), "course_id": str(course_id)})
        except RowLevelSecurityError:
            logger.info("Rejected courses_likes insert for another user's row")
            raise
        return self.dal.insert_like(user_id=user_id, course_id=course_id)

    def delete_likes(self, user_id: UUID, course_id: UUID) -> int:
        if not self.policy.can_delete(self.caller, user_id):
            logger.debug("Scoped courses_likes delete to zero rows")
            return 0
        return self.dal.delete_likes(user_id=user_id, course_id=course_id)
