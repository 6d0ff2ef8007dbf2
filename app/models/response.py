import uuid
from typing import Any, Sequence

from app.models.camel_model import CamelModel
from app.models.post import Post


class PostResult(CamelModel):
    message: str
    result: Post


class ErrorResponse(CamelModel):
    status: int
    id: uuid.UUID
    message: str
    error: str


class ValidationErrorResponse(ErrorResponse):
    errors: Sequence[Any]
