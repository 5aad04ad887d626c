import logging
import uuid
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.config.constants import (
    FEEDBACK_MESSAGE_REQUIRED, FEEDBACK_RATING_INVALID,
    MAX_FEEDBACK_RATING, MIN_FEEDBACK_RATING,
)
from skillmatch.core.errors import InputValidationError, StorageError
from skillmatch.models import Feedback
from skillmatch.utils.ids import parse_match_id

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_feedback(
        self,
        user_id: str,
        message: Optional[str],
        match_id: Optional[str] = None,
        rating: Optional[int] = None
    ) -> Feedback:
        message = (message or "").strip()
        if not message:
            raise InputValidationError(FEEDBACK_MESSAGE_REQUIRED)
        if rating is not None and not MIN_FEEDBACK_RATING <= rating <= MAX_FEEDBACK_RATING:
            raise InputValidationError(FEEDBACK_RATING_INVALID)

        feedback = Feedback(
            id=uuid.uuid4(),
            user_id=user_id,
            match_id=parse_match_id(match_id) if match_id else None,
            rating=rating,
            message=message,
        )
        self.session.add(feedback)
        try:
            await self.session.commit()
            await self.session.refresh(feedback)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to store feedback from {user_id}: {e}")
            raise StorageError.from_exception(e) from e

        logger.info(f"Feedback {feedback.id} received from {user_id}")
        return feedback
