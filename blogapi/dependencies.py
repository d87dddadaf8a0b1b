from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.config import settings
from blogapi.database import get_db
from blogapi.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> int:
    """Resolve the caller's id from the ``Authorization: Bearer`` header."""
    user_id = decode_access_token(credentials.credentials) if credentials else None
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]


class PaginationParams:
    """
    Reusable dependency parsing ``page``, ``limit`` and ``search``.

    Attributes
    ----------
    page:
        1-based page number. Zero and negative values are floored to 1.
    limit:
        Page size, floored to 1. Only capped when ``settings.MAX_PAGE_SIZE``
        is configured.
    search:
        Optional prefix keyword; an empty string means no filter.
    skip:
        Computed SQL OFFSET derived from *page* and *limit*.
    """

    def __init__(
        self,
        page: int = Query(1, description="Page number (1-based)."),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, description="Items per page."),
        search: str | None = Query(None, description="Prefix keyword."),
    ) -> None:
        self.page = max(1, page)
        self.limit = max(1, limit)
        if settings.MAX_PAGE_SIZE is not None:
            self.limit = min(self.limit, settings.MAX_PAGE_SIZE)
        self.search = search or None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class DropdownParams:
    """``fields`` (comma-separated column names) and ``keyword`` for dropdowns.

    Blank entries such as ``"id,,title"`` are ignored.
    """

    def __init__(
        self,
        fields: str | None = Query(None, description="Comma-separated columns."),
        keyword: str | None = Query(None, description="Prefix keyword."),
    ) -> None:
        # None lets the service fall back to its resource-specific default.
        names = [f.strip() for f in (fields or "").split(",") if f.strip()]
        self.fields = names or None
        self.keyword = keyword or None


def provide(service_class):
    """Dependency building *service_class* on the request's session."""

    def _provider(db: AsyncSession = Depends(get_db)):
        return service_class(db)

    _provider.__name__ = f"get_{service_class.__name__}"
    return _provider
