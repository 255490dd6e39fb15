from typing import Optional

from pydantic import BaseModel, Field


class ReverseStringRequest(BaseModel):
    text: Optional[str] = Field(default=None, examples=["Hello, World!"])


class ReverseStringResponse(BaseModel):
    original: str
    reversed: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
