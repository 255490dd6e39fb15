from typing import Optional
from uuid import UUID

from app.dependencies import get_caller, get_likes_dal
from app.models.like_api_models import (
    LikeCourseBody,
    LikeCourseRequest,
    LikeCourseResponse,
    ListLikesRequest,
    ListLikesResponse,
    UnlikeCourseRequest,
    UnlikeCourseResponse,
)
from app.policy.courses_likes import Caller
from app.services.errors import AlreadyExistsError, NotAuthorizedError
from app.services.likes_service import LikesService
from fastapi import APIRouter, Depends, HTTPException
from returns.result import Success

router = APIRouter(prefix="/courses", tags=["Likes"])


def get_likes_service(dal=Depends(get_likes_dal)) -> LikesService:
    return LikesService(dal=dal)


@router.get("/likes", response_model=ListLikesResponse)
async def list_likes(
    course_id: Optional[UUID] = None,
    user_id: Optional[UUID] = None,
    caller: Caller = Depends(get_caller),
    service: LikesService = Depends(get_likes_service),
):
    request = ListLikesRequest(user_id=user_id or caller.user_id, course_id=course_id)
    result = await service.list_likes(request)
    if isinstance(result, Success):
        return result.unwrap()
    raise HTTPException(status_code=500, detail=result.failure().message())


@router.post("/{course_id}/likes", response_model=LikeCourseResponse)
async def like_course(
    course_id: UUID,
    body: Optional[LikeCourseBody] = None,
    caller: Caller = Depends(get_caller),
    service: LikesService = Depends(get_likes_service),
):
    user_id = body.user_id if body and body.user_id else caller.user_id
    result = await service.like_course(LikeCourseRequest(user_id=user_id, course_id=course_id))
    if isinstance(result, Success):
        return result.unwrap()
    error = result.failure()
    if isinstance(error, NotAuthorizedError):
        raise HTTPException(status_code=403, detail=error.message())
    if isinstance(error, AlreadyExistsError):
        raise HTTPException(status_code=409, detail=error.message())
    raise HTTPException(status_code=500, detail=error.message())


@router.delete("/{course_id}/likes", response_model=UnlikeCourseResponse)
async def unlike_course(
    course_id: UUID,
    user_id: Optional[UUID] = None,
    caller: Caller = Depends(get_caller),
    service: LikesService = Depends(get_likes_service),
):
    request = UnlikeCourseRequest(user_id=user_id or caller.user_id, course_id=course_id)
    result = await service.unlike_course(request)
    if isinstance(result, Success):
        return result.unwrap()
    raise HTTPException(status_code=500, detail=result.failure().message())
