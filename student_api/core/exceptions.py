from typing import Any, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the application.
    Keeps the error payload returned to clients in one shape.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Any] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. CLIENT ERRORS
# =========================================================

class ValidationException(BaseAPIException):
    """400: one or more request fields failed their declared constraints"""
    def __init__(self, details: list, message: str = "Input validation failed"):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

# =========================================================
# 2. SERVER ERRORS
# =========================================================

class StorageError(BaseAPIException):
    """
    500: the database could not be reached or the statement failed.
    The driver message is logged, never returned to the client.
    """
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

class UpstreamError(BaseAPIException):
    """500: the remote function call failed (network error or non-2xx status)"""
    def __init__(self, message: str = "Error calling remote function"):
        super().__init__(
            message=message,
            code="UPSTREAM_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
