import logging
import time
from contextvars import ContextVar

from sqlalchemy import event
from starlette.types import ASGIApp, Receive, Scope, Send

from blogapi.config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Per-request SQL statement counter
# ---------------------------------------------------------------------------

query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def install_query_counter(engine) -> None:
    """
    Count every SQL statement issued through *engine* into ``query_count_var``.

    Eager loads (``joinedload``) and the separate COUNT query of a paginated
    listing are included. Call once per engine.
    """

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def _count_query(conn, cursor, statement, parameters, context, executemany):
        query_count_var.set(query_count_var.get() + 1)


# ---------------------------------------------------------------------------
# Middleware (pure ASGI so the ContextVar above is shared with the endpoint)
# ---------------------------------------------------------------------------

class TimingMiddleware:
    """
    Adds ``x-response-time-ms`` and ``x-query-count`` headers to every HTTP
    response and logs requests slower than ``settings.SLOW_REQUEST_MS``.
    """

    def __init__(self, app: ASGIApp, slow_request_ms: float | None = None) -> None:
        self.app = app
        self.slow_request_ms = (
            settings.SLOW_REQUEST_MS if slow_request_ms is None else slow_request_ms
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        query_count_var.set(0)
        start = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                queries = query_count_var.get()
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(duration_ms).encode()))
                headers.append((b"x-query-count", str(queries).encode()))
                message["headers"] = headers
                if duration_ms >= self.slow_request_ms:
                    logger.warning(
                        "Slow request %s %s: %.2f ms, %d queries",
                        scope["method"], scope["path"], duration_ms, queries,
                    )
            await send(message)

        await self.app(scope, receive, send_wrapper)
