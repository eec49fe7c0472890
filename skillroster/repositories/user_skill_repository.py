"""
UserSkill repository - data access for user/skill associations.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.models.user_skill import UserSkill
from skillroster.repositories.base import BaseRepository


class UserSkillRepository(BaseRepository[UserSkill]):
    unique_message = "User already has this skill"
    reference_message = "User or skill does not exist"

    def __init__(self):
        super().__init__(UserSkill)

    async def get_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[UserSkill]:
        """Get all skill associations for a user."""
        result = await db.execute(
            select(UserSkill)
            .where(UserSkill.user_id == user_id)
            .order_by(UserSkill.created_at)
        )
        return list(result.scalars().all())

    async def get_pair(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        skill_id: UUID,
    ) -> Optional[UserSkill]:
        result = await db.execute(
            select(UserSkill).where(
                UserSkill.user_id == user_id,
                UserSkill.skill_id == skill_id,
            )
        )
        return result.scalar_one_or_none()

    async def delete_for_user(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        user_skill_id: UUID,
    ) -> bool:
        """
        Delete an association only if it belongs to the given user.

        Returns False when nothing matched.
        """
        result = await db.execute(
            delete(UserSkill).where(
                UserSkill.user_id == user_id,
                UserSkill.id == user_skill_id,
            )
        )
        return result.rowcount > 0
