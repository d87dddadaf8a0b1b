from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import CurrentUserId, DropdownParams, PaginationParams, provide
from blogapi.schemas import (
    BlogCategoryResponse,
    BlogCreate,
    BlogResponse,
    BlogTagResponse,
    BlogUpdate,
    CommentResponse,
    DraftResponse,
    LikeResponse,
    PaginatedResponse,
)
from blogapi.services.blog_service import BlogService
from blogapi.services.category_service import BlogCategoryService
from blogapi.services.comment_service import CommentService
from blogapi.services.draft_service import DraftService
from blogapi.services.like_service import LikeService
from blogapi.services.tag_service import BlogTagService

router = APIRouter(prefix="/blogs", tags=["blogs"])

Blogs = Annotated[BlogService, Depends(provide(BlogService))]


@router.get("", response_model=PaginatedResponse[BlogResponse])
async def list_blogs(
    user_id: CurrentUserId, blogs: Blogs, pagination: PaginationParams = Depends()
):
    return await blogs.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search, owner_id=user_id
    )


@router.get("/dropdown")
async def blog_dropdown(user_id: CurrentUserId, blogs: Blogs, params: DropdownParams = Depends()):
    return await blogs.dropdown(params.fields, params.keyword, owner_id=user_id)


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: int, user_id: CurrentUserId, blogs: Blogs):
    return await blogs.get(blog_id, owner_id=user_id)


@router.post("", status_code=201, response_model=BlogResponse)
async def create_blog(data: BlogCreate, user_id: CurrentUserId, blogs: Blogs):
    return await blogs.create(data, owner_id=user_id)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: int, data: BlogUpdate, user_id: CurrentUserId, blogs: Blogs):
    return await blogs.update(blog_id, data, owner_id=user_id)


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(blog_id: int, user_id: CurrentUserId, blogs: Blogs):
    await blogs.delete(blog_id, owner_id=user_id)


# ---------------------------------------------------------------------------
# Children of one blog
# ---------------------------------------------------------------------------

@router.get("/{blog_id}/blog-tags", response_model=PaginatedResponse[BlogTagResponse])
async def list_blog_tags_of_blog(
    blog_id: int,
    user_id: CurrentUserId,
    service: Annotated[BlogTagService, Depends(provide(BlogTagService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_blog(
        blog_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/{blog_id}/blog-categories", response_model=PaginatedResponse[BlogCategoryResponse])
async def list_blog_categories_of_blog(
    blog_id: int,
    user_id: CurrentUserId,
    service: Annotated[BlogCategoryService, Depends(provide(BlogCategoryService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_blog(
        blog_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/{blog_id}/drafts", response_model=PaginatedResponse[DraftResponse])
async def list_drafts_of_blog(
    blog_id: int,
    user_id: CurrentUserId,
    service: Annotated[DraftService, Depends(provide(DraftService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_blog(
        blog_id, user_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/{blog_id}/comments", response_model=PaginatedResponse[CommentResponse])
async def list_comments_of_blog(
    blog_id: int,
    user_id: CurrentUserId,
    service: Annotated[CommentService, Depends(provide(CommentService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_blog(
        blog_id, user_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/{blog_id}/likes", response_model=PaginatedResponse[LikeResponse])
async def list_likes_of_blog(
    blog_id: int,
    user_id: CurrentUserId,
    service: Annotated[LikeService, Depends(provide(LikeService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_blog(
        blog_id, user_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )
