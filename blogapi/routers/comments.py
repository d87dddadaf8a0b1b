from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import CurrentUserId, DropdownParams, PaginationParams, provide
from blogapi.schemas import CommentCreate, CommentResponse, CommentUpdate, PaginatedResponse
from blogapi.services.comment_service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"])

Comments = Annotated[CommentService, Depends(provide(CommentService))]


@router.get("", response_model=PaginatedResponse[CommentResponse])
async def list_comments(
    user_id: CurrentUserId, comments: Comments, pagination: PaginationParams = Depends()
):
    return await comments.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search, owner_id=user_id
    )


@router.get("/dropdown")
async def comment_dropdown(
    user_id: CurrentUserId, comments: Comments, params: DropdownParams = Depends()
):
    return await comments.dropdown(params.fields, params.keyword, owner_id=user_id)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: int, user_id: CurrentUserId, comments: Comments):
    return await comments.get(comment_id, owner_id=user_id)


@router.post("", status_code=201, response_model=CommentResponse)
async def create_comment(data: CommentCreate, user_id: CurrentUserId, comments: Comments):
    return await comments.create(data, owner_id=user_id)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int, data: CommentUpdate, user_id: CurrentUserId, comments: Comments
):
    return await comments.update(comment_id, data, owner_id=user_id)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(comment_id: int, user_id: CurrentUserId, comments: Comments):
    await comments.delete(comment_id, owner_id=user_id)
