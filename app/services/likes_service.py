from app.db.exceptions import DatabaseError, RowLevelSecurityError, UniqueViolationError
from app.models.like_api_models import (
    CourseLike,
    LikeCourseRequest,
    LikeCourseResponse,
    ListLikesRequest,
    ListLikesResponse,
    UnlikeCourseRequest,
    UnlikeCourseResponse,
)
from app.models.shared import ResponseStatus
from app.services.errors import AlreadyExistsError, InternalServiceError, NotAuthorizedError, ServiceError
from app.utils.logging import get_logger
from returns.result import Failure, Result, Success

logger = get_logger(__name__)


class LikesService:
    def __init__(self, dal):
        self.dal = dal

    async def list_likes(self, request: ListLikesRequest) -> Result[ListLikesResponse, ServiceError]:
        try:
            rows = self.dal.get_likes(user_id=request.user_id, course_id=request.course_id)
            return Success(ListLikesResponse(likes=[CourseLike(**row) for row in rows], status=ResponseStatus.SUCCESS))

        except DatabaseError as e:
            logger.error("Database error while listing likes: %s", e)
            return Failure(InternalServiceError(f"Database error during fetch: {e}"))

        except Exception as e:
            logger.exception("Unhandled error while listing likes")
            return Failure(InternalServiceError(f"Unhandled error during fetch: {e}"))

    async def like_course(self, request: LikeCourseRequest) -> Result[LikeCourseResponse, ServiceError]:
        like_id = f"{request.user_id}/{request.course_id}"
        try:
            # One like per (user, course). The database may enforce this too.
            if self.dal.find_like(user_id=request.user_id, course_id=request.course_id) is not None:
                return Failure(AlreadyExistsError("Like", like_id))

            row = self.dal.insert_like(user_id=request.user_id, course_id=request.course_id)

            return Success(LikeCourseResponse(like=CourseLike(**row), status=ResponseStatus.SUCCESS))

        except RowLevelSecurityError:
            return Failure(NotAuthorizedError("like course", "for another user"))

        except UniqueViolationError:
            return Failure(AlreadyExistsError("Like", like_id))

        except DatabaseError as e:
            logger.error("Database error while inserting like: %s", e)
            return Failure(InternalServiceError(f"Database error during creation: {e}"))

        except Exception as e:
            logger.exception("Unhandled error while inserting like")
            return Failure(InternalServiceError(f"Unhandled error during creation: {e}"))

    async def unlike_course(self, request: UnlikeCourseRequest) -> Result[UnlikeCourseResponse, ServiceError]:
        try:
            deleted = self.dal.delete_likes(user_id=request.user_id, course_id=request.course_id)

            if deleted:
                return Success(UnlikeCourseResponse(deleted_count=deleted, status=ResponseStatus.SUCCESS))
            else:
                return Success(UnlikeCourseResponse(deleted_count=0, status=ResponseStatus.NOT_FOUND))

        except DatabaseError as e:
            logger.error("Database error while deleting like: %s", e)
            return Failure(InternalServiceError(f"Database error during deletion: {e}"))

        except Exception as e:
            logger.exception("Unhandled error while deleting like")
            return Failure(InternalServiceError(f"Unhandled error during deletion: {e}"))
