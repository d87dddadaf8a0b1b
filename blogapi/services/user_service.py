"""
User service.

Users are globally readable. A user may only update or delete their own
record: the router passes the caller's id as ``owner_id``, which the
repository matches against ``users.id``.
"""
from blogapi.models import User
from blogapi.repositories import UserRepository
from blogapi.schemas import UserCreate
from blogapi.security import hash_password
from blogapi.services.base import CrudService


class UserService(CrudService[User]):
    repository_class = UserRepository
    entity_name = "User"
    dropdown_fields = ("id", "name")

    def build(self, data: UserCreate, owner_id: int | None) -> User:
        return User(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
        )
