import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EntityNotFoundError(LookupError):
    """Raised by services when a (possibly owner-scoped) lookup finds nothing."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} not found")


class BadRequestError(Exception):
    """
    The single outward failure of the service layer.

    Not-found conditions, constraint violations and any other fault are all
    re-raised as this type, keeping the original message and, where the
    database supplied one, an error code. The HTTP layer answers 400.
    """

    status_code = 400

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    logger.info("400 on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )
