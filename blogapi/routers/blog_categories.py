from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import DropdownParams, PaginationParams, get_current_user_id, provide
from blogapi.schemas import (
    BlogCategoryCreate,
    BlogCategoryResponse,
    BlogCategoryUpdate,
    PaginatedResponse,
)
from blogapi.services.category_service import BlogCategoryService

router = APIRouter(
    prefix="/blog-categories",
    tags=["blog-categories"],
    dependencies=[Depends(get_current_user_id)],
)

BlogCategories = Annotated[BlogCategoryService, Depends(provide(BlogCategoryService))]


@router.get("", response_model=PaginatedResponse[BlogCategoryResponse])
async def list_blog_categories(blog_categories: BlogCategories, pagination: PaginationParams = Depends()):
    return await blog_categories.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/dropdown")
async def blog_category_dropdown(blog_categories: BlogCategories, params: DropdownParams = Depends()):
    return await blog_categories.dropdown(params.fields, params.keyword)


@router.get("/{blog_category_id}", response_model=BlogCategoryResponse)
async def get_blog_category(blog_category_id: int, blog_categories: BlogCategories):
    return await blog_categories.get(blog_category_id)


@router.post("", status_code=201, response_model=BlogCategoryResponse)
async def create_blog_category(data: BlogCategoryCreate, blog_categories: BlogCategories):
    return await blog_categories.create(data)


@router.put("/{blog_category_id}", response_model=BlogCategoryResponse)
async def update_blog_category(blog_category_id: int, data: BlogCategoryUpdate, blog_categories: BlogCategories):
    return await blog_categories.update(blog_category_id, data)


@router.delete("/{blog_category_id}", status_code=204)
async def delete_blog_category(blog_category_id: int, blog_categories: BlogCategories):
    await blog_categories.delete(blog_category_id)
