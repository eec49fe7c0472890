"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.exceptions import (
    APIException,
    ConstraintViolationException,
    ReferentialViolationException,
)
from skillroster.models.base import RecordModel

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=RecordModel)

# SQLSTATE codes reported by PostgreSQL
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return code
    return None


def translate_integrity_error(
    exc: IntegrityError,
    *,
    unique_message: Optional[str] = None,
    reference_message: Optional[str] = None,
) -> APIException:
    """
    Map a driver integrity error onto the domain exception it represents.

    PostgreSQL reports a SQLSTATE; SQLite only a message, so both are checked.
    Anything else is re-raised by the caller untouched.
    """
    code = _sqlstate(exc)
    text = str(exc.orig).lower()

    if code == _UNIQUE_VIOLATION or "unique" in text or "duplicate" in text:
        return ConstraintViolationException(unique_message or "Resource already exists")
    if code == _FOREIGN_KEY_VIOLATION or "foreign key" in text:
        return ReferentialViolationException(reference_message or "Referenced resource does not exist")
    raise exc


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self):
                super().__init__(User)
    """

    # Messages used when an insert trips a constraint
    unique_message: Optional[str] = None
    reference_message: Optional[str] = None

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_id(
        self,
        db: AsyncSession,
        id: UUID,
    ) -> Optional[ModelType]:
        """Get a single record by ID."""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        *,
        order_by: Any = None,
    ) -> List[ModelType]:
        """Get every record. Tables here are small and never paginated."""
        query = select(self.model)
        if order_by is not None:
            query = query.order_by(order_by)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """
        Create a new record.

        Raises:
            ConstraintViolationException: A unique constraint rejected the row.
            ReferentialViolationException: A foreign key points nowhere.
        """
        instance = self.model(**kwargs)
        db.add(instance)
        try:
            await db.flush()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(
                exc,
                unique_message=self.unique_message,
                reference_message=self.reference_message,
            ) from exc
        await db.refresh(instance)
        return instance
