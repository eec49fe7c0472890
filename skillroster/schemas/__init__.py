"""
Pydantic schemas for API validation and serialization.
"""
from skillroster.schemas.base import BaseSchema, IDSchema
from skillroster.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from skillroster.schemas.user import UserResponse
from skillroster.schemas.skill import (
    SkillResponse,
    UserSkillCreate,
    UserSkillResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "IDSchema",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # User
    "UserResponse",
    # Skill
    "SkillResponse",
    "UserSkillCreate",
    "UserSkillResponse",
]
