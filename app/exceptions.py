from typing import Any

from fastapi import HTTPException, status


class PersistenceException(HTTPException):
    error = "PersistenceError"

    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class PostNotFoundException(HTTPException):
    error = "NotFoundError"

    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationException(HTTPException):
    error = "ValidationError"

    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)
