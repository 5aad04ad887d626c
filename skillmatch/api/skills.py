"""Skill catalog and the caller's want/give interests."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.api.deps import AuthUser, get_db, require_user
from skillmatch.schemas.skill import AddUserSkillRequest, SkillOut, UserSkillOut
from skillmatch.services.skill_service import SkillService

router = APIRouter(tags=["skills"])


@router.get("/skills")
async def get_skills(session: AsyncSession = Depends(get_db)):
    skills = await SkillService(session).list_skills()
    return {"skills": [SkillOut.model_validate(s) for s in skills]}


@router.get("/me/skills")
async def get_my_skills(
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    user_skills = await SkillService(session).list_user_skills(user.id)
    return {"skills": [UserSkillOut.model_validate(s) for s in user_skills]}


@router.post("/me/skills")
async def add_my_skill(
    req: AddUserSkillRequest,
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    user_skill = await SkillService(session).add_user_skill(user.id, req.skill_id, req.type)
    return {"skill": UserSkillOut.model_validate(user_skill)}


@router.delete("/me/skills/{skill_id}")
async def remove_my_skill(
    skill_id: int,
    type: Optional[str] = Query(None),
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    await SkillService(session).remove_user_skill(user.id, skill_id, type)
    return {"ok": True}
