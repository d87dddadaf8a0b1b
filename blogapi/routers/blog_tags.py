from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import DropdownParams, PaginationParams, get_current_user_id, provide
from blogapi.schemas import BlogTagCreate, BlogTagResponse, BlogTagUpdate, PaginatedResponse
from blogapi.services.tag_service import BlogTagService

router = APIRouter(
    prefix="/blog-tags", tags=["blog-tags"], dependencies=[Depends(get_current_user_id)]
)

BlogTags = Annotated[BlogTagService, Depends(provide(BlogTagService))]


@router.get("", response_model=PaginatedResponse[BlogTagResponse])
async def list_blog_tags(blog_tags: BlogTags, pagination: PaginationParams = Depends()):
    return await blog_tags.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/dropdown")
async def blog_tag_dropdown(blog_tags: BlogTags, params: DropdownParams = Depends()):
    return await blog_tags.dropdown(params.fields, params.keyword)


@router.get("/{blog_tag_id}", response_model=BlogTagResponse)
async def get_blog_tag(blog_tag_id: int, blog_tags: BlogTags):
    return await blog_tags.get(blog_tag_id)


@router.post("", status_code=201, response_model=BlogTagResponse)
async def create_blog_tag(data: BlogTagCreate, blog_tags: BlogTags):
    return await blog_tags.create(data)


@router.put("/{blog_tag_id}", response_model=BlogTagResponse)
async def update_blog_tag(blog_tag_id: int, data: BlogTagUpdate, blog_tags: BlogTags):
    return await blog_tags.update(blog_tag_id, data)


@router.delete("/{blog_tag_id}", status_code=204)
async def delete_blog_tag(blog_tag_id: int, blog_tags: BlogTags):
    await blog_tags.delete(blog_tag_id)
