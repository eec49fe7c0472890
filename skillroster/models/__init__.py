"""
Database models for Skill Roster.

Every table has a UUID primary key and a created_at timestamp.
"""
from skillroster.models.base import RecordModel
from skillroster.models.user import User
from skillroster.models.skill import Skill
from skillroster.models.user_skill import UserSkill

__all__ = [
    "RecordModel",
    "User",
    "Skill",
    "UserSkill",
]
