# gradebook/core/exceptions.py
"""Custom exceptions for the gradebook application."""
from fastapi import HTTPException
from typing import Any, Dict, Optional


class GradebookException(HTTPException):
    """Base exception for the gradebook application."""
    def __init__(
        self,
        status_code: int,
        detail: Any,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class Unauthorized(GradebookException):
    """Raised when the request carries no resolvable identity."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(status_code=401, detail=message)


class NotFoundOrUnauthorized(GradebookException):
    """Raised when a row is missing or owned by someone else.

    Both cases produce the same response so that callers cannot probe
    for the existence of other teachers' data.
    """
    def __init__(self, resource: str):
        super().__init__(
            status_code=404,
            detail=f"{resource} not found or unauthorized"
        )


class ValidationFailure(GradebookException):
    """Raised for domain validation errors."""
    def __init__(self, message: str, field: Optional[str] = None):
        detail = {"error": "Validation Error", "message": message}
        if field:
            detail["field"] = field
        super().__init__(status_code=422, detail=detail)


class IntegrityFailure(GradebookException):
    """Raised when a related row vanished in the middle of an operation."""
    def __init__(self, message: str):
        super().__init__(
            status_code=409,
            detail={
                "error": "Integrity Error",
                "message": message
            }
        )
