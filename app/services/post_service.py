from aws_lambda_powertools import Logger

from app.exceptions import PostNotFoundException, ValidationException
from app.models.post import Post
from app.models.response import PostResult
from app.repositories.post_repository import PostRepository
from app.schemas.post_schema import CreatePost
from app.services.shortener_service import ShortenerService


class PostService:
    ERROR_MISSING_FIELDS = "All fields are required: titulo, img, descripcion"
    ERROR_POST_NOT_FOUND = "The requested post was not found"
    MESSAGE_POST_CREATED = "The post was created successfully"
    MESSAGE_POST_DELETED = "The post was deleted successfully"
    MESSAGE_POST_LIKED = "The post was liked successfully"

    def __init__(self, repository: PostRepository, shortener: ShortenerService):
        self._logger = Logger(utc=True)
        self._repo = repository
        self._shortener = shortener

    async def get_posts(self) -> list[Post]:
        return [Post(**item) for item in await self._repo.get_posts()]

    async def create_post(self, model: CreatePost) -> PostResult:
        if missing := model.missing_fields:
            self._logger.warning(f"Rejected post with {missing=}")
            raise ValidationException(self.ERROR_MISSING_FIELDS)
        shortened = await self._shortener.shorten(model.img)
        item = await self._repo.create_post(model.titulo, shortened.url, model.descripcion)
        post = Post(**item)
        self._logger.info(f"Post created: {post.id=} shortened={shortened.shortened}")
        return PostResult(message=self.MESSAGE_POST_CREATED, result=post)

    async def like_post(self, post_id: int) -> PostResult:
        item = await self._repo.increment_likes(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        post = Post(**item)
        self._logger.info(f"Post liked: {post_id=} likes={post.likes}")
        return PostResult(message=self.MESSAGE_POST_LIKED, result=post)

    async def delete_post(self, post_id: int) -> PostResult:
        item = await self._repo.delete_post(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post deleted: {post_id=}")
        return PostResult(message=self.MESSAGE_POST_DELETED, result=Post(**item))
