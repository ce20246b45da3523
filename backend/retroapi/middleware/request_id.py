"""
Retro Board Backend — Request ID Middleware
============================================

What:  Assigns an id to each incoming request and returns it in the response.
How:   Honours a client-sent X-Request-ID, otherwise generates a short UUID;
       stores it in a ContextVar and request.state, echoes it as a header.
Who:   Applied to every request via Starlette middleware.

Every log line written while handling the request and every error
envelope carry the same id, so a client-reported id maps to server logs.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate an 8-character id
        3. Store in ContextVar (loggers, exception handlers) and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
