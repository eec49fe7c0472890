"""
API dependencies for dependency injection.
"""
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.database import get_db
from skillroster.core.exceptions import (
    AccessDeniedException,
    InvalidTokenException,
    NotFoundException,
    UnauthorizedException,
)
from skillroster.core.logging import bind_user, get_logger
from skillroster.models.user import User
from skillroster.services.auth_service import AuthService

logger = get_logger(__name__)

# Clients send the raw token in Authorization; a "Bearer " prefix is also accepted
token_header = APIKeyHeader(name="Authorization", auto_error=False)

auth_service = AuthService()


def _extract_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, rest = authorization.partition(" ")
    if scheme.lower() == "bearer" and rest:
        return rest.strip()
    return authorization.strip()


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Depends(token_header),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the current authenticated user.

    Every failure is reported as the same 401.

    Raises:
        UnauthorizedException: No token, bad or expired token, or unknown user
    """
    token = _extract_token(authorization)
    if not token:
        raise UnauthorizedException()

    try:
        user = await auth_service.resolve_token(db, token)
    except (InvalidTokenException, NotFoundException) as exc:
        logger.info("auth_rejected", reason=exc.code)
        raise UnauthorizedException()

    request.state.current_user = user
    bind_user(str(user.id))
    return user


async def get_path_owner(
    user_id: str,
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Ensure the ``user_id`` path parameter names the authenticated user.

    Raises:
        AccessDeniedException: The path names someone else
    """
    try:
        requested = UUID(user_id)
    except ValueError:
        raise AccessDeniedException()

    if requested != current_user.id:
        logger.info(
            "access_denied",
            user_id=str(current_user.id),
            requested_user_id=user_id,
        )
        raise AccessDeniedException()
    return current_user
