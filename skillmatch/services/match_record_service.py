import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select, update, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.config.constants import MATCH_NOT_FOUND, MATCH_USERS_REQUIRED, USER_ID_REQUIRED
from skillmatch.core.errors import InputValidationError, NotFoundError, StorageError
from skillmatch.models import Match, MatchStatus
from skillmatch.utils.ids import normalize_user_id, parse_match_id

logger = logging.getLogger(__name__)


def canonical_pair(user_a: str, user_b: str) -> tuple:
    """Order a pair so that A->B and B->A proposals are stored the same way."""
    return (user_a, user_b) if user_a < user_b else (user_b, user_a)


class MatchRecordService:
    """
    Lifecycle of stored match proposals.

    proposed --accept--> accepted, proposed --reject--> rejected. Transitions are
    not guarded: a later accept/reject simply overwrites an earlier one.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_match(
        self,
        user_a: Optional[str],
        user_b: Optional[str],
        matched_skills: Optional[List[str]] = None
    ) -> Match:
        if not user_a or not user_b:
            raise InputValidationError(MATCH_USERS_REQUIRED)

        first, second = canonical_pair(normalize_user_id(user_a), normalize_user_id(user_b))
        match = Match(
            id=uuid.uuid4(),
            user_a=first,
            user_b=second,
            matched_skills=list(matched_skills or []),
            status=MatchStatus.PROPOSED.value,
        )
        self.session.add(match)
        try:
            await self.session.commit()
            await self.session.refresh(match)
        except SQLAlchemyError as e:
            # Unique violations are not told apart from other insert errors
            await self.session.rollback()
            logger.error(f"Failed to create match {first}/{second}: {e}")
            raise StorageError.from_exception(e) from e

        logger.info(f"Match {match.id} proposed between {first} and {second}")
        return match

    async def list_user_matches(self, user_id: Optional[str]) -> List[Match]:
        if not user_id:
            raise InputValidationError(USER_ID_REQUIRED)
        user_id = normalize_user_id(user_id)

        stmt = (
            select(Match)
            .where(or_(Match.user_a == user_id, Match.user_b == user_id))
            .order_by(Match.created_at.desc())
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list matches for {user_id}: {e}")
            raise StorageError.from_exception(e) from e
        return list(result.scalars().all())

    async def accept_match(self, match_id) -> Match:
        return await self._set_status(
            match_id,
            status=MatchStatus.ACCEPTED.value,
            accepted_at=datetime.now(timezone.utc),
        )

    async def reject_match(self, match_id, reason: Optional[str] = None) -> Match:
        return await self._set_status(
            match_id,
            status=MatchStatus.REJECTED.value,
            reason=reason or None,
        )

    async def _set_status(self, match_id, **values) -> Match:
        mid = parse_match_id(match_id)
        stmt = (
            update(Match)
            .where(Match.id == mid)
            .values(**values)
            .returning(Match)
        )
        try:
            result = await self.session.execute(stmt)
            match = result.scalar_one_or_none()
            if match is None:
                await self.session.rollback()
                raise NotFoundError(MATCH_NOT_FOUND)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to update match {mid}: {e}")
            raise StorageError.from_exception(e) from e

        logger.info(f"Match {mid} is now {values['status']}")
        return match
