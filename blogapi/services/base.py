"""
Generic CRUD service shared by every resource.

Design notes
------------
- A service owns one repository bound to the request's ``AsyncSession``.
  It flushes but never commits; the transaction boundary belongs to the
  ``get_db`` dependency, so a failed request leaves nothing behind.
- Every repository call runs inside ``translate_errors``. Whatever goes
  wrong (a missing row, an integrity violation, an unknown dropdown field)
  reaches the caller as ``BadRequestError`` with the original message and,
  when the database reported one, its error code. Not-found and bad input
  are deliberately indistinguishable to API clients.
- The caller's id travels as an explicit ``owner_id`` argument. Services
  for owner-scoped resources refuse to run without one.
- Updates lock the target row (``SELECT ... FOR UPDATE``) before merging so
  two concurrent partial updates cannot overwrite each other's fields.
"""
import logging
from contextlib import contextmanager
from typing import Any, Generic, Sequence

from pydantic import BaseModel
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.errors import BadRequestError, EntityNotFoundError
from blogapi.repositories.base import ModelT, Searchable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def _error_message(exc: Exception) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _error_code(exc: Exception) -> str | None:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        for attr in ("sqlstate", "pgcode", "sqlite_errorname"):
            code = getattr(exc.orig, attr, None)
            if code:
                return str(code)
    if isinstance(exc, SQLAlchemyError):
        return exc.code
    return None


@contextmanager
def translate_errors(action: str):
    """Re-raise any failure inside the block as ``BadRequestError``."""
    try:
        yield
    except BadRequestError:
        raise
    except Exception as exc:
        logger.warning("%s failed: %s", action, exc)
        raise BadRequestError(_error_message(exc), _error_code(exc)) from exc


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class CrudService(Generic[ModelT]):
    repository_class: type[Searchable]
    entity_name: str
    owner_scoped: bool = False
    dropdown_fields: tuple[str, ...] = ("id",)

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repository: Searchable[ModelT] = self.repository_class(db)

    # -- reads ---------------------------------------------------------

    async def get_all(
        self, *, skip: int, take: int, search: str | None = None, owner_id: int | None = None
    ) -> dict[str, Any]:
        self._check_owner(owner_id)
        with translate_errors(f"Listing {self.entity_name}"):
            rows, total = await self.repository.find_page(
                skip=skip, take=take, keyword=search, owner_id=owner_id
            )
        return {"result": rows, "total": total}

    async def get_by_parent(
        self,
        parent_field: str,
        parent_id: int,
        *,
        skip: int,
        take: int,
        search: str | None = None,
        owner_id: int | None = None,
        joins: Sequence[str] = (),
    ) -> dict[str, Any]:
        self._check_owner(owner_id)
        with translate_errors(f"Listing {self.entity_name} by {parent_field}"):
            rows, total = await self.repository.find_page(
                skip=skip,
                take=take,
                keyword=search,
                owner_id=owner_id,
                parent=(parent_field, parent_id),
                joins=joins,
            )
        return {"result": rows, "total": total}

    async def get(self, entity_id: int, owner_id: int | None = None) -> ModelT:
        self._check_owner(owner_id)
        with translate_errors(f"Fetching {self.entity_name} {entity_id}"):
            return await self._get_or_raise(entity_id, owner_id)

    async def dropdown(
        self,
        fields: Sequence[str] | None = None,
        keyword: str | None = None,
        owner_id: int | None = None,
    ) -> list[dict[str, Any]]:
        self._check_owner(owner_id)
        with translate_errors(f"{self.entity_name} dropdown"):
            return await self.repository.dropdown(
                fields or self.dropdown_fields, keyword=keyword, owner_id=owner_id
            )

    # -- writes --------------------------------------------------------

    async def create(self, data: BaseModel, owner_id: int | None = None) -> ModelT:
        self._check_owner(owner_id)
        with translate_errors(f"Creating {self.entity_name}"):
            entity = await self.repository.add(self.build(data, owner_id))
            logger.debug("Created %s %s", self.entity_name, entity.id)
            return await self._get_or_raise(entity.id, owner_id)

    async def update(
        self, entity_id: int, data: BaseModel, owner_id: int | None = None
    ) -> ModelT:
        """Merge only the fields the caller sent; everything else keeps its value."""
        self._check_owner(owner_id)
        with translate_errors(f"Updating {self.entity_name} {entity_id}"):
            entity = await self.repository.find_by_id(entity_id, owner_id, lock=True)
            if entity is None:
                raise EntityNotFoundError(self.entity_name)
            self.apply_changes(entity, data.model_dump(exclude_unset=True))
            await self.db.flush()
            return await self._get_or_raise(entity_id, owner_id)

    async def delete(self, entity_id: int, owner_id: int | None = None) -> None:
        self._check_owner(owner_id)
        with translate_errors(f"Deleting {self.entity_name} {entity_id}"):
            entity = await self._get_or_raise(entity_id, owner_id)
            await self.repository.delete(entity)
            logger.debug("Deleted %s %s", self.entity_name, entity_id)

    # -- hooks ---------------------------------------------------------

    def build(self, data: BaseModel, owner_id: int | None) -> ModelT:
        """New ORM instance from a create schema; the owner comes from the caller."""
        values = data.model_dump()
        if self.owner_scoped:
            values[self.repository.owner_field] = owner_id
        return self.repository.model(**values)

    def apply_changes(self, entity: ModelT, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(entity, field, value)

    # -- internals -----------------------------------------------------

    async def _get_or_raise(self, entity_id: int, owner_id: int | None) -> ModelT:
        entity = await self.repository.find_by_id(entity_id, owner_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name)
        return entity

    def _check_owner(self, owner_id: int | None) -> None:
        if self.owner_scoped and owner_id is None:
            raise TypeError(f"{type(self).__name__} requires the caller's owner_id")
