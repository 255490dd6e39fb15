from typing import Optional

from app.models.string_api_models import ErrorResponse, ReverseStringRequest, ReverseStringResponse
from app.services.errors import MissingParameterError
from app.services.string_service import ReverseStringService
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from returns.result import Success

router = APIRouter(tags=["Functions"])

# Sent on every response, including errors.
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def get_reverse_string_service() -> ReverseStringService:
    return ReverseStringService()


@router.get(
    "/reverse-string",
    response_model=ReverseStringResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def reverse_string(text: Optional[str] = None, service: ReverseStringService = Depends(get_reverse_string_service)):
    result = await service.reverse(ReverseStringRequest(text=text))
    if isinstance(result, Success):
        return JSONResponse(status_code=200, content=result.unwrap().model_dump(), headers=CORS_HEADERS)
    error = result.failure()
    if isinstance(error, MissingParameterError):
        return JSONResponse(status_code=400, content={"error": error.message()}, headers=CORS_HEADERS)
    return JSONResponse(status_code=500, content={"error": "Internal server error"}, headers=CORS_HEADERS)
