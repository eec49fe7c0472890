"""
Skill repository - data access for Skill entity.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.models.skill import Skill
from skillroster.repositories.base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    unique_message = "Skill already exists"

    def __init__(self):
        super().__init__(Skill)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Optional[Skill]:
        """Find a skill by its unique name."""
        result = await db.execute(
            select(Skill).where(Skill.name == name)
        )
        return result.scalar_one_or_none()

    async def list_skills(
        self,
        db: AsyncSession,
    ) -> List[Skill]:
        """All skills, alphabetically."""
        return await self.get_all(db, order_by=Skill.name)
