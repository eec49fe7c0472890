"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from skillroster.repositories.base import BaseRepository, translate_integrity_error
from skillroster.repositories.user_repository import UserRepository
from skillroster.repositories.skill_repository import SkillRepository
from skillroster.repositories.user_skill_repository import UserSkillRepository

__all__ = [
    "BaseRepository",
    "translate_integrity_error",
    "UserRepository",
    "SkillRepository",
    "UserSkillRepository",
]
