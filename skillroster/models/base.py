"""
Declarative base shared by users, skills and user_skills.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from skillroster.core.database import Base


class RecordModel(Base):
    """
    Abstract row with a random UUID key and its insertion time.

    Rows are created and deleted but never edited, so there is no
    ``updated_at``. ``created_at`` gives user_skills a stable listing order.
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
