from fastapi import Depends, Request

from app import settings
from app.database import Database
from app.repositories.post_repository import PostRepository
from app.services.post_service import PostService
from app.services.shortener_service import ShortenerService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_post_repository(database: Database = Depends(get_database)) -> PostRepository:
    return PostRepository(database, settings.posts_table)


def get_shortener_service() -> ShortenerService:
    return ShortenerService(settings)


def get_post_service(
    repository: PostRepository = Depends(get_post_repository),
    shortener: ShortenerService = Depends(get_shortener_service),
) -> PostService:
    return PostService(repository, shortener)
