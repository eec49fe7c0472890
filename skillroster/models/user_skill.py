"""
UserSkill model - links a user to a skill they claim.
"""
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillroster.models.base import RecordModel

if TYPE_CHECKING:
    from skillroster.models.skill import Skill
    from skillroster.models.user import User


class UserSkill(RecordModel):
    """
    User skill association.

    A user can hold each skill at most once. Rows are created and
    deleted by their owner, never updated.
    """

    __tablename__ = "user_skills"

    # Unique constraint: one row per (user, skill)
    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="unique_user_id_skill_id"),
    )

    # Foreign Keys
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("skills.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill", back_populates="holders")

    def __repr__(self) -> str:
        return f"<UserSkill skill_id={self.skill_id} for user_id={self.user_id}>"
