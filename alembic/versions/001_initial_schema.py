"""create users, skills and user_skills

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

  • users: unique username (≤20), bcrypt password hash
  • skills: unique name (≤100)
  • user_skills: user ↔ skill link, unique per (user_id, skill_id)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(length=20), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        _created_at(),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "skills",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        _created_at(),
    )
    op.create_index("ix_skills_name", "skills", ["name"], unique=True)

    op.create_table(
        "user_skills",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.Uuid(as_uuid=True), sa.ForeignKey("skills.id"), nullable=False),
        _created_at(),
        sa.UniqueConstraint("user_id", "skill_id", name="unique_user_id_skill_id"),
    )
    op.create_index("ix_user_skills_user_id", "user_skills", ["user_id"])
    op.create_index("ix_user_skills_skill_id", "user_skills", ["skill_id"])


def downgrade() -> None:
    op.drop_index("ix_user_skills_skill_id", table_name="user_skills")
    op.drop_index("ix_user_skills_user_id", table_name="user_skills")
    op.drop_table("user_skills")
    op.drop_index("ix_skills_name", table_name="skills")
    op.drop_table("skills")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
