"""
User model - represents an account that can log in and claim skills.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillroster.models.base import RecordModel

if TYPE_CHECKING:
    from skillroster.models.user_skill import UserSkill


class User(RecordModel):
    """
    User entity.

    Only the bcrypt hash of the password is stored.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    skills: Mapped[List["UserSkill"]] = relationship(
        "UserSkill",
        back_populates="user",
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"
