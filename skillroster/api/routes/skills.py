"""
Skill catalogue routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from skillroster.core.database import get_db
from skillroster.schemas.skill import SkillResponse
from skillroster.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

skill_service = SkillService()


@router.get("", response_model=List[SkillResponse])
async def list_skills(db: AsyncSession = Depends(get_db)):
    """List every skill."""
    return await skill_service.list_skills(db)
