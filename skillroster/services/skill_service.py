"""
Skill service - skill catalogue and per-user skill associations.

Ownership is checked before these methods are called; they trust the
user id they are given.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.logging import get_logger
from skillroster.repositories.skill_repository import SkillRepository
from skillroster.repositories.user_skill_repository import UserSkillRepository
from skillroster.schemas.skill import SkillResponse, UserSkillResponse

logger = get_logger(__name__)


class SkillService:
    """Handles the skill catalogue."""

    def __init__(self):
        self.skill_repo = SkillRepository()

    async def create_skill(
        self,
        db: AsyncSession,
        name: str,
    ) -> SkillResponse:
        """
        Add a skill to the catalogue.

        Raises:
            ConstraintViolationException: If the name already exists.
        """
        skill = await self.skill_repo.create(db, name=name)
        await db.commit()
        logger.info("skill_created", skill_id=str(skill.id), name=name)
        return SkillResponse.model_validate(skill)

    async def list_skills(
        self,
        db: AsyncSession,
    ) -> List[SkillResponse]:
        skills = await self.skill_repo.list_skills(db)
        return [SkillResponse.model_validate(skill) for skill in skills]


class UserSkillService:
    """Handles the skills a user claims."""

    def __init__(self):
        self.user_skill_repo = UserSkillRepository()

    async def add_skill(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        skill_id: UUID,
    ) -> UserSkillResponse:
        """
        Link a skill to a user.

        Raises:
            ConstraintViolationException: The user already has this skill.
            ReferentialViolationException: The user or skill does not exist.
        """
        user_skill = await self.user_skill_repo.create(
            db,
            user_id=user_id,
            skill_id=skill_id,
        )
        await db.commit()
        logger.info(
            "user_skill_created",
            user_skill_id=str(user_skill.id),
            user_id=str(user_id),
            skill_id=str(skill_id),
        )
        return UserSkillResponse.model_validate(user_skill)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[UserSkillResponse]:
        user_skills = await self.user_skill_repo.get_for_user(db, user_id)
        return [UserSkillResponse.model_validate(us) for us in user_skills]

    async def remove_skill(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        user_skill_id: UUID,
    ) -> None:
        """Delete a user's association. Deleting a missing row is not an error."""
        deleted = await self.user_skill_repo.delete_for_user(
            db,
            user_id=user_id,
            user_skill_id=user_skill_id,
        )
        await db.commit()
        logger.info(
            "user_skill_deleted",
            user_skill_id=str(user_skill_id),
            user_id=str(user_id),
            matched=deleted,
        )
