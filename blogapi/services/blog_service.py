from blogapi.models import Blog
from blogapi.repositories import BlogRepository
from blogapi.services.base import CrudService


class BlogService(CrudService[Blog]):
    """Blogs are owned by their author; every call needs the caller's id."""

    repository_class = BlogRepository
    entity_name = "Blog"
    owner_scoped = True
    dropdown_fields = ("id", "title")
