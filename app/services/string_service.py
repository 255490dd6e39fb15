from datetime import datetime, timezone

from app.models.string_api_models import ReverseStringRequest, ReverseStringResponse
from app.services.errors import InternalServiceError, MissingParameterError, ServiceError
from app.utils.logging import get_logger
from returns.result import Failure, Result, Success

logger = get_logger(__name__)


# Reverses by code point. No normalization, so combining marks stay where they land.
def reverse_text(text: str) -> str:
    return text[::-1]


# ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z
def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ReverseStringService:
    async def reverse(self, request: ReverseStringRequest) -> Result[ReverseStringResponse, ServiceError]:
        if not request.text:
            return Failure(MissingParameterError("text"))

        try:
            return Success(ReverseStringResponse(original=request.text, reversed=reverse_text(request.text), timestamp=utc_timestamp()))

        except Exception as e:
            logger.exception("Error processing reverse-string request")
            return Failure(InternalServiceError(f"Unhandled error during reversal: {e}"))
