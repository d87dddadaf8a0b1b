from blogapi.models import Draft
from blogapi.repositories import DraftRepository
from blogapi.services.base import CrudService


class DraftService(CrudService[Draft]):
    repository_class = DraftRepository
    entity_name = "Draft"
    owner_scoped = True

    async def get_by_blog(
        self, blog_id: int, owner_id: int, *, skip: int, take: int, search: str | None = None
    ):
        """The caller's own drafts of one blog, searched by content."""
        return await self.get_by_parent(
            "blog_id", blog_id, skip=skip, take=take, search=search, owner_id=owner_id
        )
