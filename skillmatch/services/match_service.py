import logging
from typing import Dict, Iterable, List, Sequence, Tuple
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.config.constants import USER_ID_REQUIRED
from skillmatch.core.errors import InputValidationError, StorageError
from skillmatch.models import Profile, Skill, SkillType, UserSkill
from skillmatch.schemas.match import MatchCandidate
from skillmatch.utils.ids import normalize_user_id

logger = logging.getLogger(__name__)


def rank_candidates(
    offers: Sequence[Tuple[str, int]],
    profiles: Iterable[Profile],
    skill_names: Dict[int, str],
) -> List[MatchCandidate]:
    """
    Build one candidate per profile from the (user_id, skill_id) "give" rows.

    Skill ids missing from the catalog are dropped and names are deduplicated.
    The result is ordered by number of matched skills, most first; ties keep
    the order of ``profiles``.
    """
    offered_by_user: Dict[str, List[int]] = {}
    for user_id, skill_id in offers:
        offered_by_user.setdefault(user_id, []).append(skill_id)

    candidates = []
    for profile in profiles:
        names = [skill_names.get(sid) for sid in offered_by_user.get(profile.user_id, [])]
        candidates.append(MatchCandidate(
            user_id=profile.user_id,
            full_name=profile.full_name,
            contact_link=profile.contact_link,
            avatar_url=profile.avatar_url or None,
            matched_skills=list(dict.fromkeys(n for n in names if n)),
        ))

    # sorted() is stable
    return sorted(candidates, key=lambda c: c.match_count, reverse=True)


class MatchService:
    """Finds users who give what a user wants. Read-only."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_candidates(self, user_id: str) -> List[MatchCandidate]:
        if not user_id:
            raise InputValidationError(USER_ID_REQUIRED)
        user_id = normalize_user_id(user_id)

        try:
            wanted_ids = await self._get_wanted_skill_ids(user_id)
            if not wanted_ids:
                return []

            offers = [
                (other_id, skill_id)
                for other_id, skill_id in await self._get_offers(wanted_ids)
                if other_id != user_id
            ]
            candidate_ids = list(dict.fromkeys(other_id for other_id, _ in offers))
            if not candidate_ids:
                return []

            profiles = await self._get_profiles(candidate_ids)
            skill_names = await self._get_skill_names()
        except SQLAlchemyError as e:
            logger.error(f"Candidate lookup failed for {user_id}: {e}")
            raise StorageError.from_exception(e) from e

        candidates = rank_candidates(offers, profiles, skill_names)
        logger.info(f"Found {len(candidates)} candidates for {user_id}")
        return candidates

    async def _get_wanted_skill_ids(self, user_id: str) -> List[int]:
        stmt = select(UserSkill.skill_id).where(
            UserSkill.user_id == user_id,
            UserSkill.type == SkillType.WANT.value,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _get_offers(self, skill_ids: List[int]) -> List[Tuple[str, int]]:
        stmt = select(UserSkill.user_id, UserSkill.skill_id).where(
            UserSkill.skill_id.in_(skill_ids),
            UserSkill.type == SkillType.GIVE.value,
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def _get_profiles(self, user_ids: List[str]) -> List[Profile]:
        stmt = select(Profile).where(Profile.user_id.in_(user_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _get_skill_names(self) -> Dict[int, str]:
        # Whole catalog, read once per request
        result = await self.session.execute(select(Skill.id, Skill.name))
        return {skill_id: name for skill_id, name in result.all()}
