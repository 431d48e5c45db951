"""
NoteKeeper Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two user-visible failures.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the services layer and by MemoryStore.delete_note.
When:  During request processing; both kinds end the request immediately.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── BadRequestError     → 400 Bad Request (missing fields, undecodable body)
    └── UnauthorizedError   → 401 Unauthorized (bad credentials, unknown session)
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(NoteKeeperError):
    """
    Raised when a request body is missing required fields or cannot be decoded.

    When:    Emptiness checks fail ("Invalid request format"), or the JSON body
             is malformed / carries a field of the wrong type (decoder message).
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "bad_request"

    def __init__(
        self,
        message: str = "Invalid request format",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(NoteKeeperError):
    """
    Raised when credentials match no user or a session id is unknown.

    HTTP:    401 Unauthorized
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
