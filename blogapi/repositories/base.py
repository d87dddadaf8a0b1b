"""
Generic search / pagination / dropdown query construction.

Every resource in the API shares one query shape; a repository subclass only
declares its model and a handful of class attributes:

``search_fields``
    Columns on the model that the keyword is prefix-matched against.
``owner_field``
    Column holding the owning user's id, or ``None`` for global resources.
    Whenever an ``owner_id`` is passed, ``owner_field = owner_id`` is ANDed
    into the WHERE clause. The keyword group can never widen past it.
``relations``
    Relationships eager-loaded by ``find_by_id``.
``joined_search``
    Relationship name -> searchable columns of the joined entity. Listings
    INNER JOIN these relationships, return them populated, and OR their
    columns into the same keyword group as ``search_fields``.
``hidden_fields``
    Columns that may never be projected by ``dropdown``.

WHERE clause layout
-------------------
::

    [owner_field = :owner_id]
    AND [parent_field = :parent_id]
    AND ( field_1 LIKE 'kw%' OR ... OR joined.col LIKE 'kw%' )

Every term is optional. Rows are returned newest first, ``id`` descending as
the tie-break so page boundaries are stable when timestamps collide.
"""
from types import MappingProxyType
from typing import Any, Generic, Mapping, Protocol, Sequence, TypeVar

from sqlalchemy import String, cast, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload

from blogapi.config import settings
from blogapi.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Searchable(Protocol[ModelT]):
    """
    What ``CrudService`` needs from a repository: the three reads every
    resource exposes plus add/delete.
    """

    model: type[ModelT]
    owner_field: str | None

    async def find_by_id(
        self, entity_id: int, owner_id: int | None = None, *, lock: bool = False
    ) -> ModelT | None:
        ...

    async def find_page(
        self,
        *,
        skip: int = ...,
        take: int = ...,
        keyword: str | None = None,
        owner_id: int | None = None,
        parent: tuple[str, int] | None = None,
        joins: Sequence[str] | None = None,
    ) -> tuple[list[ModelT], int]:
        ...

    async def dropdown(
        self, fields: Sequence[str], keyword: str | None = None, owner_id: int | None = None
    ) -> list[dict[str, Any]]:
        ...

    async def add(self, entity: ModelT) -> ModelT:
        ...

    async def delete(self, entity: ModelT) -> None:
        ...


class SearchRepository(Generic[ModelT]):
    model: type[ModelT]
    search_fields: tuple[str, ...] = ()
    owner_field: str | None = None
    relations: tuple[str, ...] = ()
    joined_search: Mapping[str, tuple[str, ...]] = MappingProxyType({})
    hidden_fields: frozenset[str] = frozenset()

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def find_by_id(
        self, entity_id: int, owner_id: int | None = None, *, lock: bool = False
    ) -> ModelT | None:
        """
        Fetch one row, scoped to *owner_id* when given.

        With ``lock=True`` the row is selected FOR UPDATE and relations are
        not loaded; used by the update path inside the request transaction.
        """
        stmt = select(self.model).where(self.model.id == entity_id, *self._scope(owner_id))
        if lock:
            stmt = stmt.with_for_update()
        else:
            stmt = stmt.options(*(joinedload(getattr(self.model, name)) for name in self.relations))
        stmt = stmt.execution_options(populate_existing=True)
        return await self.session.scalar(stmt)

    async def find_page(
        self,
        *,
        skip: int = 0,
        take: int = settings.DEFAULT_PAGE_SIZE,
        keyword: str | None = None,
        owner_id: int | None = None,
        parent: tuple[str, int] | None = None,
        joins: Sequence[str] | None = None,
    ) -> tuple[list[ModelT], int]:
        """
        Return one page of matching rows and the total match count.

        *parent* is ``(column_name, value)`` for "children of X" listings.
        *joins* overrides which ``joined_search`` relationships take part;
        pass an empty tuple to search the model's own fields only.
        """
        joins = tuple(self.joined_search) if joins is None else tuple(joins)

        stmt = select(self.model)
        columns = [getattr(self.model, name) for name in self.search_fields]
        for name in joins:
            relationship = getattr(self.model, name)
            target = relationship.property.mapper.class_
            stmt = stmt.join(relationship)
            columns.extend(getattr(target, col) for col in self.joined_search.get(name, ()))

        conditions = list(self._scope(owner_id))
        if parent is not None:
            field, value = parent
            conditions.append(self._column(field) == value)
        keyword_clause = self._keyword_clause(columns, keyword)
        if keyword_clause is not None:
            conditions.append(keyword_clause)
        stmt = stmt.where(*conditions)

        total = await self.session.scalar(select(func.count()).select_from(stmt.subquery()))

        stmt = (
            stmt.options(*(contains_eager(getattr(self.model, name)) for name in joins))
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(take)
            .execution_options(populate_existing=True)
        )
        rows = (await self.session.scalars(stmt)).all()
        return list(rows), total or 0

    async def dropdown(
        self,
        fields: Sequence[str],
        keyword: str | None = None,
        owner_id: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Project at most ``settings.DROPDOWN_LIMIT`` rows onto *fields*.

        The keyword is matched against the projected columns only.
        """
        columns = [self._column(name, projectable=True) for name in dict.fromkeys(fields)]
        if not columns:
            raise ValueError(f"No fields requested for {self.model.__name__} dropdown")

        conditions = list(self._scope(owner_id))
        keyword_clause = self._keyword_clause(columns, keyword)
        if keyword_clause is not None:
            conditions.append(keyword_clause)

        stmt = (
            select(*columns)
            .where(*conditions)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .limit(limit or settings.DROPDOWN_LIMIT)
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)
        await self.session.flush()

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------

    def _scope(self, owner_id: int | None) -> list:
        if owner_id is None:
            return []
        if self.owner_field is None:
            raise ValueError(f"{self.model.__name__} is not owner-scoped")
        return [getattr(self.model, self.owner_field) == owner_id]

    def _column(self, name: str, projectable: bool = False):
        column_names = {attr.key for attr in inspect(self.model).column_attrs}
        if name not in column_names or (projectable and name in self.hidden_fields):
            raise ValueError(f"Unknown field '{name}' for {self.model.__name__}")
        return getattr(self.model, name)

    @staticmethod
    def _keyword_clause(columns: list, keyword: str | None):
        """OR of ``column LIKE 'keyword%'``; non-text columns are cast to text."""
        if not keyword or not columns:
            return None
        return or_(
            *(
                (col if isinstance(col.expression.type, String) else cast(col, String)).startswith(
                    keyword, autoescape=True
                )
                for col in columns
            )
        )
