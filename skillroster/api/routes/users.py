"""
User routes.

Thin controllers - all business logic lives in UserService / UserSkillService.
A caller may only read or change their own skills; get_path_owner rejects
anyone else before a service is touched.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.api.deps import get_path_owner
from skillroster.core.database import get_db
from skillroster.models.user import User
from skillroster.schemas.skill import UserSkillCreate, UserSkillResponse
from skillroster.schemas.user import UserResponse
from skillroster.services.skill_service import UserSkillService
from skillroster.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()
user_skill_service = UserSkillService()


@router.get("", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List every user (id and username only)."""
    return await user_service.list_users(db)


# ── Skills ────────────────────────────────────────────────────────────────────

@router.get("/{user_id}/userSkills", response_model=List[UserSkillResponse])
async def list_user_skills(
    owner: User = Depends(get_path_owner),
    db: AsyncSession = Depends(get_db),
):
    """Return the caller's skill associations."""
    return await user_skill_service.list_for_user(db, owner.id)


@router.post(
    "/{user_id}/userSkills",
    response_model=UserSkillResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_user_skill(
    body: UserSkillCreate,
    owner: User = Depends(get_path_owner),
    db: AsyncSession = Depends(get_db),
):
    """Claim a skill for the caller."""
    return await user_skill_service.add_skill(
        db,
        user_id=owner.id,
        skill_id=body.skill_id,
    )


@router.delete(
    "/{user_id}/userSkills/{user_skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_user_skill(
    user_skill_id: str,
    owner: User = Depends(get_path_owner),
    db: AsyncSession = Depends(get_db),
):
    """Drop one of the caller's skills. Unknown ids succeed without effect."""
    try:
        target = UUID(user_skill_id)
    except ValueError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    await user_skill_service.remove_skill(
        db,
        user_id=owner.id,
        user_skill_id=target,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
