from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import DropdownParams, PaginationParams, get_current_user_id, provide
from blogapi.schemas import (
    BlogCategoryResponse,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    PaginatedResponse,
)
from blogapi.services.category_service import BlogCategoryService, CategoryService

router = APIRouter(
    prefix="/categories", tags=["categories"], dependencies=[Depends(get_current_user_id)]
)

Categories = Annotated[CategoryService, Depends(provide(CategoryService))]


@router.get("", response_model=PaginatedResponse[CategoryResponse])
async def list_categories(categories: Categories, pagination: PaginationParams = Depends()):
    return await categories.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/dropdown")
async def category_dropdown(categories: Categories, params: DropdownParams = Depends()):
    return await categories.dropdown(params.fields, params.keyword)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, categories: Categories):
    return await categories.get(category_id)


@router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(data: CategoryCreate, categories: Categories):
    return await categories.create(data)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: int, data: CategoryUpdate, categories: Categories):
    return await categories.update(category_id, data)


@router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: int, categories: Categories):
    await categories.delete(category_id)


@router.get(
    "/{category_id}/blog-categories", response_model=PaginatedResponse[BlogCategoryResponse]
)
async def list_blog_categories_of_category(
    category_id: int,
    service: Annotated[BlogCategoryService, Depends(provide(BlogCategoryService))],
    pagination: PaginationParams = Depends(),
):
    return await service.get_by_category(
        category_id, skip=pagination.skip, take=pagination.limit, search=pagination.search
    )
