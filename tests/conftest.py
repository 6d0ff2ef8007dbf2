from random import randint
from unittest.mock import AsyncMock

import pytest

from app.database import Database, QueryResult
from app.models.post import Post
from app.repositories.post_repository import PostRepository
from app.services.post_service import PostService
from app.services.shortener_service import ShortenerService
from app.settings import Settings
from tests.helpers.utils import InMemoryPostRepository


def pytest_configure():
    pytest.shortener_base_url = "https://short.test/api-create.php"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        db_password="secret",
        shortener_base_url=pytest.shortener_base_url,
        shortener_enabled=True,
    )


@pytest.fixture
def make_post(faker):
    def make(**kwargs) -> Post:
        data = {
            "id": faker.unique.random_int(min=1, max=100_000),
            "titulo": faker.sentence(nb_words=3),
            "img": faker.image_url(),
            "descripcion": faker.text(max_nb_chars=120),
            "likes": randint(0, 50),
        }
        data.update(kwargs)
        return Post(**data)

    return make


@pytest.fixture
def posts(make_post) -> list[Post]:
    return [make_post() for _ in range(5)]


@pytest.fixture
def database() -> AsyncMock:
    database = AsyncMock(spec=Database)
    database.execute.return_value = QueryResult(rows=[], row_count=0)
    return database


@pytest.fixture
def post_repository(database: AsyncMock) -> PostRepository:
    return PostRepository(database)


@pytest.fixture
def in_memory_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def shortener_service(settings: Settings) -> ShortenerService:
    return ShortenerService(settings)


@pytest.fixture
def post_service(
    post_repository: PostRepository, shortener_service: ShortenerService
) -> PostService:
    return PostService(post_repository, shortener_service)
