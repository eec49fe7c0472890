"""Core module exports."""
from skillroster.core.config import settings, get_settings
from skillroster.core.database import (
    Base,
    get_db,
    init_db,
    reset_schema,
    close_db,
    engine,
    async_session_maker,
)
from skillroster.core.security import (
    verify_password,
    hash_password,
    hash_password_async,
    verify_password_async,
    create_access_token,
    decode_token,
)
from skillroster.core.exceptions import (
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    ConstraintViolationException,
    ReferentialViolationException,
    InvalidCredentialsException,
    InvalidTokenException,
    AccessDeniedException,
    UserNotFoundException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "reset_schema",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "hash_password_async",
    "verify_password_async",
    "create_access_token",
    "decode_token",
    # Exceptions
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "ConstraintViolationException",
    "ReferentialViolationException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "AccessDeniedException",
    "UserNotFoundException",
]
