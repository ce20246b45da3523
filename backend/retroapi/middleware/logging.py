"""
Retro Board Backend — Request Logging Middleware
=================================================

What:  One structured log line per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration, request id and client address.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses request ID for correlation).

Logged:      method, path, resource (user, retro, thought, action item),
             status, duration, client IP, request ID
Not logged:  request bodies (passwords) and the Authorization header (tokens)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from retroapi.middleware.request_id import request_id_var

logger = logging.getLogger("retroapi.access")

# Path segment → resource name used in access logs
RESOURCES = {
    "signup": "user",
    "signin": "user",
    "users": "user",
    "retros": "retro",
    "thoughts": "thought",
    "actionitems": "action item",
}


def resource_for(path: str) -> str:
    """
    Name the resource a request path addresses.

    The last known segment wins, so nested routes name the child:
    `/retros/{id}/thoughts` and `/retros/thoughts/{id}` are thoughts,
    `/users/{id}/retros` is a retro listing.
    """
    for segment in reversed(path.strip("/").split("/")):
        if segment in RESOURCES:
            return RESOURCES[segment]
    return "-"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request at a level chosen by status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO

    /health is skipped (probed every few seconds by orchestrators).
    """

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        resource = resource_for(path)
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s (%s) %d %.1fms [%s] from %s",
            method,
            path,
            resource,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "resource": resource,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
