"""
Skill model - a named skill users can claim.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillroster.models.base import RecordModel

if TYPE_CHECKING:
    from skillroster.models.user_skill import UserSkill


class Skill(RecordModel):
    """Skill entity. Names are unique."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )

    # Relationships
    holders: Mapped[List["UserSkill"]] = relationship(
        "UserSkill",
        back_populates="skill",
    )

    def __repr__(self) -> str:
        return f"<Skill {self.name}>"
