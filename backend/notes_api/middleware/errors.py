"""
Notes API — Unhandled Error Middleware
=======================================

What:  Turns any exception escaping a route into a JSON 500 response.
Why here: A FastAPI handler registered for `Exception` runs in Starlette's
       ServerErrorMiddleware, outside every user middleware, so its response
       would skip CORS and X-Request-ID. Catching the exception innermost
       keeps those headers on the 500 like on any other response.

Security: The stack trace is always logged server-side. The exception text
reaches the client only in the development environment.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Catch-all for unexpected errors raised by route handlers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error: %s",
                rid,
                str(exc),
                exc_info=True,
            )
            verbose = request.app.state.settings.is_development
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "message": str(exc) if verbose else "Something went wrong",
                    "request_id": rid,
                },
            )
