from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import DropdownParams, PaginationParams, get_current_user_id, provide
from blogapi.schemas import BlogTagResponse, PaginatedResponse, TagCreate, TagResponse, TagUpdate
from blogapi.services.tag_service import BlogTagService, TagService

router = APIRouter(prefix="/tags", tags=["tags"], dependencies=[Depends(get_current_user_id)])

Tags = Annotated[TagService, Depends(provide(TagService))]


@router.get("", response_model=PaginatedResponse[TagResponse])
async def list_tags(tags: Tags, pagination: PaginationParams = Depends()):
    return await tags.get_all(skip=pagination.skip, take=pagination.limit, search=pagination.search)


@router.get("/dropdown")
async def tag_dropdown(tags: Tags, params: DropdownParams = Depends()):
    return await tags.dropdown(params.fields, params.keyword)


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: int, tags: Tags):
    return await tags.get(tag_id)


@router.post("", status_code=201, response_model=TagResponse)
async def create_tag(data: TagCreate, tags: Tags):
    return await tags.create(data)


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(tag_id: int, data: TagUpdate, tags: Tags):
    return await tags.update(tag_id, data)


@router.delete("/{tag_id}", status_code=204)
async def delete_tag(tag_id: int, tags: Tags):
    await tags.delete(tag_id)


@router.get("/{tag_id}/blog-tags", response_model=PaginatedResponse[BlogTagResponse])
async def list_blog_tags_of_tag(
    tag_id: int,
    service: Annotated[BlogTagService, Depends(provide(BlogTagService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_tag(
        tag_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )
