from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.api.deps import AuthUser, get_db, require_user
from skillmatch.schemas.feedback import CreateFeedbackRequest, FeedbackOut
from skillmatch.services.feedback_service import FeedbackService

router = APIRouter(tags=["feedbacks"])


@router.post("/feedbacks")
async def create_feedback(
    req: CreateFeedbackRequest,
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    """Store feedback from the authenticated user, optionally about one match."""
    feedback = await FeedbackService(session).create_feedback(
        user_id=user.id,
        message=req.message,
        match_id=req.match_id,
        rating=req.rating,
    )
    return {"feedback": FeedbackOut.model_validate(feedback)}
