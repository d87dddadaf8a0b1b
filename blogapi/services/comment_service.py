"""
Comment service.

Comments are owned by the commenter. "Comments of a blog" is scoped to the
caller as well, so it lists the caller's own comments on that blog.
"""
from blogapi.models import Comment
from blogapi.repositories import CommentRepository
from blogapi.services.base import CrudService


class CommentService(CrudService[Comment]):
    repository_class = CommentRepository
    entity_name = "Comment"
    owner_scoped = True

    async def get_by_blog(
        self, blog_id: int, owner_id: int, *, skip: int, take: int, search: str | None = None
    ):
        return await self.get_by_parent(
            "blog_id", blog_id, skip=skip, take=take, search=search, owner_id=owner_id
        )
