from datetime import datetime
from typing import List, Optional
from uuid import UUID

from app.models.shared import ResponseStatus
from pydantic import BaseModel, Field


# A single row of courses_likes.
class CourseLike(BaseModel):
    user_id: UUID
    course_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# List Likes endpoint
# Returns only likes the caller may see. Likes owned by other users are
# filtered out, so an empty list means "none visible", never "forbidden".
class ListLikesRequest(BaseModel):
    user_id: Optional[UUID] = None
    course_id: Optional[UUID] = None


class ListLikesResponse(BaseModel):
    likes: List[CourseLike] = []
    status: ResponseStatus = ResponseStatus.SUCCESS


# Like Course endpoint
# Body is optional, user_id defaults to the authenticated caller.
class LikeCourseBody(BaseModel):
    user_id: Optional[UUID] = Field(default=None, examples=["6f1c2a7e-3f0b-4c8e-9d7a-1b2c3d4e5f60"])


class LikeCourseRequest(BaseModel):
    user_id: UUID
    course_id: UUID


class LikeCourseResponse(BaseModel):
    like: Optional[CourseLike] = None
    status: ResponseStatus = ResponseStatus.SUCCESS


# Unlike Course endpoint
# SUCCESS if a like was removed. NOT_FOUND if there was nothing the caller
# was allowed to remove.
class UnlikeCourseRequest(BaseModel):
    user_id: UUID
    course_id: UUID


class UnlikeCourseResponse(BaseModel):
    deleted_count: int = 0
    status: ResponseStatus = ResponseStatus.SUCCESS
