"""
Album Catalog API - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the few ways a request can fail.
How:   Each exception carries a message, an optional context dict, and the
       HTTP status / error code it maps to. A global handler (main.py) and the
       fault-isolation middleware turn them into responses.
Who:   Raised by the catalog and by the serving layer.

Exception Hierarchy:
    AlbumsAPIError (base)          → 500 Internal Server Error
    ├── CatalogIntegrityError      → 500 (catalog built from invalid records)
    └── HandlerFaultError          → 500 (unexpected exception while serving)

Route-level 404s are not part of this hierarchy: the router raises Starlette's
HTTPException and main.py renders it with the configured error body style.
"""

from typing import Any, Dict, Optional


class AlbumsAPIError(Exception):
    """
    Base exception for all Album Catalog API errors.

    Attributes:
        message:     User-facing error description (safe to return in a response)
        context:     Additional debug info (logged but NOT returned to the client)
        status_code: HTTP status the error maps to
        error_code:  Machine-readable code used in the JSON error envelope
    """

    status_code: int = 500
    error_code: str = "internal_server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class CatalogIntegrityError(AlbumsAPIError):
    """
    Raised when a catalog is constructed from records that break its invariants.

    When:    Two albums share the same id.
    HTTP:    500 (only reachable if a catalog is built lazily inside a request)
    """

    def __init__(
        self,
        album_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["album_id"] = album_id
        super().__init__(message=f"Duplicate album id '{album_id}' in catalog", context=ctx)
        self.album_id = album_id


class HandlerFaultError(AlbumsAPIError):
    """
    Raised (and immediately rendered) when a handler fails unexpectedly.

    What:    Wraps the original exception so the serving layer deals with a
             single, known error kind.
    When:    Any exception escapes a route handler or one of its dependencies.
    HTTP:    500 Internal Server Error

    The original exception is kept on ``cause`` and logged server-side; the
    client only ever sees the generic message.
    """

    def __init__(
        self,
        cause: BaseException,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["exception_type"] = type(cause).__name__
        super().__init__(
            message="An unexpected error occurred. Please try again or contact support.",
            context=ctx,
        )
        self.cause = cause
