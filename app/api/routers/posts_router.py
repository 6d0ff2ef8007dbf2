from fastapi import APIRouter, Depends, status

from app.deps import get_post_service
from app.models.post import Post
from app.models.response import PostResult
from app.schemas.post_schema import CreatePost
from app.services.post_service import PostService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
async def get_posts(post_service: PostService = Depends(get_post_service)) -> list[Post]:
    return await post_service.get_posts()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    model: CreatePost, post_service: PostService = Depends(get_post_service)
) -> PostResult:
    return await post_service.create_post(model)


@router.put("/like/{post_id}", status_code=status.HTTP_200_OK)
async def like_post(
    post_id: int, post_service: PostService = Depends(get_post_service)
) -> PostResult:
    return await post_service.like_post(post_id)


@router.delete("/{post_id}", status_code=status.HTTP_200_OK)
async def delete_post(
    post_id: int, post_service: PostService = Depends(get_post_service)
) -> PostResult:
    return await post_service.delete_post(post_id)
