"""
Authentication service - handles registration, login, and token resolution.
"""
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserNotFoundException,
)
from skillroster.core.logging import get_logger
from skillroster.core.security import (
    create_access_token,
    decode_token,
    dummy_verify_async,
    hash_password_async,
    verify_password_async,
)
from skillroster.models.user import User
from skillroster.repositories.user_repository import UserRepository
from skillroster.schemas.auth import TokenResponse

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> User:
        """
        Create a user with a bcrypt-hashed password.

        Raises:
            ConstraintViolationException: If the username is taken.
        """
        user = await self.user_repo.create(
            db,
            username=username,
            password_hash=await hash_password_async(password),
        )
        await db.commit()

        logger.info("user_registered", user_id=str(user.id), username=username)
        return user

    async def login(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> TokenResponse:
        """
        Check credentials and issue an access token.

        Raises:
            UserNotFoundException: If no user has this username.
            InvalidCredentialsException: If the password is wrong.
        """
        user = await self.user_repo.get_by_username(db, username)
        if not user:
            # Same bcrypt cost as a real check, so timing does not reveal the miss
            await dummy_verify_async()
            logger.info("login_failed", username=username, reason="unknown_user")
            raise UserNotFoundException()

        if not await verify_password_async(password, user.password_hash):
            logger.info("login_failed", username=username, reason="bad_password")
            raise InvalidCredentialsException()

        return TokenResponse(token=create_access_token({"sub": str(user.id)}))

    async def resolve_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> User:
        """
        Verify a token and load the user it was issued to.

        Raises:
            InvalidTokenException: Bad signature, expired, or no usable subject.
            UserNotFoundException: The subject no longer exists.
        """
        payload = decode_token(token)
        if not payload:
            raise InvalidTokenException()

        try:
            user_id = UUID(str(payload.get("sub")))
        except ValueError:
            raise InvalidTokenException()

        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException()

        return user
