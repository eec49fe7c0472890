"""
Skill and user-skill schemas.
"""
from uuid import UUID
from skillroster.schemas.base import BaseSchema, IDSchema


class SkillResponse(IDSchema):
    """Skill response schema."""

    name: str


class UserSkillCreate(BaseSchema):
    """Body of POST /users/{id}/userSkills."""

    skill_id: UUID


class UserSkillResponse(IDSchema):
    """User skill association response."""

    user_id: UUID
    skill_id: UUID
