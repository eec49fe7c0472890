"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Not authorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """422 Validation Error"""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, code, message, details)


# Store integrity exceptions
class ConstraintViolationException(ConflictException):
    """A unique column or unique pair already holds this value"""

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message=message, code="CONSTRAINT_VIOLATION")


class ReferentialViolationException(ValidationException):
    """A foreign key points at a row that does not exist"""

    def __init__(self, message: str = "Referenced resource does not exist"):
        super().__init__(message=message, code="REFERENTIAL_VIOLATION")


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Unknown username or wrong password; the two are indistinguishable"""

    def __init__(self):
        super().__init__(
            message="Invalid username or password",
            code="INVALID_CREDENTIALS",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid or expired token",
            code="INVALID_TOKEN",
        )


class AccessDeniedException(ForbiddenException):
    """Caller does not own the requested resource"""

    def __init__(self):
        super().__init__(message="Access denied", code="ACCESS_DENIED")


# Resource specific exceptions
class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self):
        super().__init__(message="User not found", code="USER_NOT_FOUND")
