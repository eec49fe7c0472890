"""
Fixture seeding - sample users, skills and associations for development.

Rows are matched by natural key (username, skill name, user/skill pair) and
only the missing ones are inserted, so the seed can run against a database
that already holds part of the fixture. Everything is written in one
transaction so a failed seed leaves nothing behind.
"""
from typing import Dict, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.logging import get_logger
from skillroster.core.security import hash_password_async
from skillroster.models.skill import Skill
from skillroster.models.user import User
from skillroster.models.user_skill import UserSkill
from skillroster.repositories.skill_repository import SkillRepository
from skillroster.repositories.user_repository import UserRepository
from skillroster.repositories.user_skill_repository import UserSkillRepository

logger = get_logger(__name__)


SEED_USERS: List[Tuple[str, str]] = [
    ("logan", "password1"),
    ("chase", "password2"),
    ("lincoln", "password3"),
    ("boots", "password4"),
]

SEED_SKILLS: List[str] = ["running", "barking", "dogTricks", "meowing"]

SEED_USER_SKILLS: List[Tuple[str, str]] = [
    ("logan", "running"),
    ("logan", "dogTricks"),
    ("chase", "running"),
    ("chase", "barking"),
    ("chase", "meowing"),
    ("lincoln", "barking"),
    ("lincoln", "dogTricks"),
    ("boots", "meowing"),
]


class SeedService:
    """Loads the sample fixture, filling in whatever is missing."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.skill_repo = SkillRepository()
        self.user_skill_repo = UserSkillRepository()

    async def seed(self, db: AsyncSession) -> bool:
        """
        Insert the fixture rows that are not already present.

        Existing users keep their password hash.

        Returns:
            True if any row was written, False if the whole fixture was already there.
        """
        added = {"users": 0, "skills": 0, "user_skills": 0}

        users: Dict[str, User] = {}
        for username, password in SEED_USERS:
            user = await self.user_repo.get_by_username(db, username)
            if user is None:
                user = User(
                    username=username,
                    password_hash=await hash_password_async(password),
                )
                db.add(user)
                added["users"] += 1
            users[username] = user

        skills: Dict[str, Skill] = {}
        for name in SEED_SKILLS:
            skill = await self.skill_repo.get_by_name(db, name)
            if skill is None:
                skill = Skill(name=name)
                db.add(skill)
                added["skills"] += 1
            skills[name] = skill

        await db.flush()

        for username, skill_name in SEED_USER_SKILLS:
            user_id = users[username].id
            skill_id = skills[skill_name].id
            if await self.user_skill_repo.get_pair(db, user_id=user_id, skill_id=skill_id):
                continue
            db.add(UserSkill(user_id=user_id, skill_id=skill_id))
            added["user_skills"] += 1

        if not any(added.values()):
            logger.info("seed_skipped", reason="fixture_present")
            return False

        await db.commit()

        logger.info("seed_complete", **added)
        return True
