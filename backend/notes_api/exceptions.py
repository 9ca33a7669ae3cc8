"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios the API exposes.
How:   Each exception carries a client-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       JSON error responses with the right HTTP status code.
Who:   Raised by the service layer; caught by the handlers in main.py.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError   → 400 Bad Request (missing content on create)
    └── NotFoundError     → 404 Not Found (id lookup miss on get/update)

    Route misses and unexpected exceptions are not part of this hierarchy;
    they are handled by the Starlette HTTPException and catch-all handlers.
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when client input fails validation.

    When:    POST /api/notes without a truthy `content`.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesAPIError):
    """
    Raised when a requested note does not exist.

    When:    GET or PUT /api/notes/{id} with an id not in the collection.
    HTTP:    404 Not Found

    The client-facing message stays fixed ("Note not found"); the looked-up
    id travels in the context for server-side logs.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id
