"""
User schemas.
"""
from skillroster.schemas.base import IDSchema


class UserResponse(IDSchema):
    """Public user summary. The password hash is never exposed."""

    username: str
