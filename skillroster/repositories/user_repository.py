"""
User repository - data access for User entity.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.models.user import User
from skillroster.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    unique_message = "Username already exists"

    def __init__(self):
        super().__init__(User)

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> Optional[User]:
        """Find a user by username."""
        result = await db.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def list_users(
        self,
        db: AsyncSession,
    ) -> List[User]:
        """All users, alphabetically."""
        return await self.get_all(db, order_by=User.username)
