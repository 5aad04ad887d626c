import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.config.constants import SKILL_NOT_FOUND, SKILL_TYPE_INVALID, USER_SKILL_NOT_FOUND
from skillmatch.core.errors import InputValidationError, NotFoundError, StorageError
from skillmatch.models import Skill, SkillType, UserSkill

logger = logging.getLogger(__name__)

VALID_SKILL_TYPES = {t.value for t in SkillType}


class SkillService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_skills(self) -> List[Skill]:
        try:
            result = await self.session.execute(select(Skill).order_by(Skill.name.asc()))
        except SQLAlchemyError as e:
            logger.error(f"Failed to load skill catalog: {e}")
            raise StorageError.from_exception(e) from e
        return list(result.scalars().all())

    async def list_user_skills(self, user_id: str) -> List[UserSkill]:
        stmt = select(UserSkill).where(UserSkill.user_id == user_id).order_by(UserSkill.type, UserSkill.skill_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load skills of {user_id}: {e}")
            raise StorageError.from_exception(e) from e
        return list(result.scalars().all())

    async def add_user_skill(self, user_id: str, skill_id: Optional[int], skill_type: Optional[str]) -> UserSkill:
        """Register a want/give interest. Adding the same interest twice returns the existing row."""
        if skill_type not in VALID_SKILL_TYPES:
            raise InputValidationError(SKILL_TYPE_INVALID)
        if skill_id is None:
            raise InputValidationError("skill_id required")

        try:
            existing = await self._get_user_skill(user_id, skill_id, skill_type)
            if existing:
                return existing

            if await self.session.get(Skill, skill_id) is None:
                raise NotFoundError(SKILL_NOT_FOUND)

            user_skill = UserSkill(user_id=user_id, skill_id=skill_id, type=skill_type)
            self.session.add(user_skill)
            await self.session.commit()
            await self.session.refresh(user_skill)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to add skill {skill_id} ({skill_type}) for {user_id}: {e}")
            raise StorageError.from_exception(e) from e

        logger.info(f"User {user_id} now {skill_type}s skill {skill_id}")
        return user_skill

    async def remove_user_skill(self, user_id: str, skill_id: int, skill_type: Optional[str]) -> None:
        if skill_type not in VALID_SKILL_TYPES:
            raise InputValidationError(SKILL_TYPE_INVALID)

        try:
            user_skill = await self._get_user_skill(user_id, skill_id, skill_type)
            if not user_skill:
                raise NotFoundError(USER_SKILL_NOT_FOUND)
            await self.session.delete(user_skill)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to remove skill {skill_id} ({skill_type}) for {user_id}: {e}")
            raise StorageError.from_exception(e) from e

    async def _get_user_skill(self, user_id: str, skill_id: int, skill_type: str) -> Optional[UserSkill]:
        stmt = select(UserSkill).where(
            UserSkill.user_id == user_id,
            UserSkill.skill_id == skill_id,
            UserSkill.type == skill_type,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
