"""
User service - read access to user accounts.
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.repositories.user_repository import UserRepository
from skillroster.schemas.user import UserResponse


class UserService:
    """Handles user listing."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def list_users(
        self,
        db: AsyncSession,
    ) -> List[UserResponse]:
        """Every user as an id/username summary."""
        users = await self.user_repo.list_users(db)
        return [UserResponse.model_validate(user) for user in users]
