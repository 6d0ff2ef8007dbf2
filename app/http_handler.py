import uuid
from contextlib import asynccontextmanager
from http import HTTPStatus

import uvicorn
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.logger import set_package_logger
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import UJSONResponse
from starlette.exceptions import HTTPException

from app import settings
from app.api.api import router as api_router
from app.database import Database
from app.exceptions import ValidationException
from app.middlewares import CorrelationIdMiddleware
from app.models.response import ErrorResponse, ValidationErrorResponse
from app.repositories.post_repository import PostRepository

if settings.debug:
    set_package_logger()

logger = Logger(utc=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database(settings)
    await database.connect()
    if settings.db_create_schema:
        await PostRepository(database, settings.posts_table).create_table()
    app.state.database = database
    try:
        yield
    finally:
        await database.disconnect()


app = FastAPI(
    debug=settings.debug, title=settings.app_name, version="1.0.0", lifespan=lifespan
)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware)
app.include_router(api_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(
    request: Request, error: HTTPException
) -> UJSONResponse:
    error_id = uuid.uuid4()
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.exception(f"Received http exception {error_id=}")
    else:
        logger.warning(f"Received http exception {error_id=} {error.detail=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(
                status=error.status_code,
                id=error_id,
                message=str(error.detail),
                error=getattr(error, "error", HTTPStatus(error.status_code).phrase),
            )
        ),
        status_code=error.status_code,
        headers=error.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> UJSONResponse:
    error_id = uuid.uuid4()
    status_code = status.HTTP_400_BAD_REQUEST
    logger.warning(f"Received request validation error {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ValidationErrorResponse(
                status=status_code,
                id=error_id,
                message=str(error),
                error=ValidationException.error,
                errors=error.errors(),
            )
        ),
        status_code=status_code,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, error: Exception) -> UJSONResponse:
    error_id = uuid.uuid4()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.exception(f"Received unhandled exception {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(
                status=status_code,
                id=error_id,
                message=str(error) if settings.debug else "Internal Server Error",
                error="InternalServerError",
            )
        ),
        status_code=status_code,
    )


def main():
    uvicorn.run("app.http_handler:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
