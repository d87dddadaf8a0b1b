"""
Tags and the blog <-> tag junction.

Both are global. Junction listings join their parents: the general listing
searches blog title and tag name, "tags of a blog" searches the tag name,
and "blogs of a tag" searches the blog title.
"""
from blogapi.models import BlogTag, Tag
from blogapi.repositories import BlogTagRepository, TagRepository
from blogapi.services.base import CrudService


class TagService(CrudService[Tag]):
    repository_class = TagRepository
    entity_name = "Tag"
    dropdown_fields = ("id", "name")


class BlogTagService(CrudService[BlogTag]):
    repository_class = BlogTagRepository
    entity_name = "BlogTag"

    async def get_by_blog(self, blog_id: int, *, skip: int, take: int, search: str | None = None):
        return await self.get_by_parent(
            "blog_id", blog_id, skip=skip, take=take, search=search, joins=("tag",)
        )

    async def get_by_tag(self, tag_id: int, *, skip: int, take: int, search: str | None = None):
        return await self.get_by_parent(
            "tag_id", tag_id, skip=skip, take=take, search=search, joins=("blog",)
        )
