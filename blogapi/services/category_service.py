"""Categories and the blog <-> category junction; mirrors ``tag_service``."""
from blogapi.models import BlogCategory, Category
from blogapi.repositories import BlogCategoryRepository, CategoryRepository
from blogapi.services.base import CrudService


class CategoryService(CrudService[Category]):
    repository_class = CategoryRepository
    entity_name = "Category"
    dropdown_fields = ("id", "name")


class BlogCategoryService(CrudService[BlogCategory]):
    repository_class = BlogCategoryRepository
    entity_name = "BlogCategory"

    async def get_by_blog(self, blog_id: int, *, skip: int, take: int, search: str | None = None):
        return await self.get_by_parent(
            "blog_id", blog_id, skip=skip, take=take, search=search, joins=("category",)
        )

    async def get_by_category(
        self, category_id: int, *, skip: int, take: int, search: str | None = None
    ):
        return await self.get_by_parent(
            "category_id", category_id, skip=skip, take=take, search=search, joins=("blog",)
        )
