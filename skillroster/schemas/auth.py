"""
Authentication schemas.
"""
from pydantic import Field
from skillroster.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Login request body."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseSchema):
    """Registration request body."""

    username: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1, max_length=72)  # bcrypt input limit


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    token: str
