"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.api.deps import get_current_user
from skillroster.core.database import get_db
from skillroster.core.exceptions import InvalidCredentialsException, NotFoundException
from skillroster.core.rate_limit import RATE_AUTH, limiter, remember_login_username
from skillroster.models.user import User
from skillroster.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from skillroster.schemas.user import UserResponse
from skillroster.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(remember_login_username)],
)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Create an account. Returns the new user's id and username."""
    return await auth_service.register(
        db,
        username=body.username,
        password=body.password,
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    dependencies=[Depends(remember_login_username)],
)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Login with username and password.

    An unknown username is reported the same way as a wrong password.
    """
    try:
        return await auth_service.login(
            db,
            username=body.username,
            password=body.password,
        )
    except NotFoundException:
        raise InvalidCredentialsException()


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    """The user the presented token belongs to."""
    return current_user
