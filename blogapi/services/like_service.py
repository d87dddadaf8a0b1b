from blogapi.models import Like
from blogapi.repositories import LikeRepository
from blogapi.services.base import CrudService


class LikeService(CrudService[Like]):
    repository_class = LikeRepository
    entity_name = "Like"
    owner_scoped = True

    async def get_by_blog(
        self, blog_id: int, owner_id: int, *, skip: int, take: int, search: str | None = None
    ):
        # Likes carry no text of their own; the keyword has nothing to match.
        return await self.get_by_parent(
            "blog_id", blog_id, skip=skip, take=take, search=search, owner_id=owner_id
        )
