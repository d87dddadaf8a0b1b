from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import CurrentUserId, DropdownParams, PaginationParams, provide
from blogapi.schemas import LikeCreate, LikeResponse, LikeUpdate, PaginatedResponse
from blogapi.services.like_service import LikeService

router = APIRouter(prefix="/likes", tags=["likes"])

Likes = Annotated[LikeService, Depends(provide(LikeService))]


@router.get("", response_model=PaginatedResponse[LikeResponse])
async def list_likes(
    user_id: CurrentUserId, likes: Likes, pagination: PaginationParams = Depends()
):
    return await likes.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search, owner_id=user_id
    )


@router.get("/dropdown")
async def like_dropdown(user_id: CurrentUserId, likes: Likes, params: DropdownParams = Depends()):
    return await likes.dropdown(params.fields, params.keyword, owner_id=user_id)


@router.get("/{like_id}", response_model=LikeResponse)
async def get_like(like_id: int, user_id: CurrentUserId, likes: Likes):
    return await likes.get(like_id, owner_id=user_id)


@router.post("", status_code=201, response_model=LikeResponse)
async def create_like(data: LikeCreate, user_id: CurrentUserId, likes: Likes):
    return await likes.create(data, owner_id=user_id)


@router.put("/{like_id}", response_model=LikeResponse)
async def update_like(like_id: int, data: LikeUpdate, user_id: CurrentUserId, likes: Likes):
    return await likes.update(like_id, data, owner_id=user_id)


@router.delete("/{like_id}", status_code=204)
async def delete_like(like_id: int, user_id: CurrentUserId, likes: Likes):
    await likes.delete(like_id, owner_id=user_id)
