"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(self, message: str, details: Optional[list[str]] = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.details = details or []


class DuplicateKeyError(AppError):
    """Raised when creating a resource whose identifier is already taken."""

    status_code = 409

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} already exists: {identifier}", code="DUPLICATE_KEY")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InternalError(AppError):
    """Raised for unexpected failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="INTERNAL_ERROR")
