from datetime import datetime
from typing import Optional
import uuid
from pydantic import BaseModel, ConfigDict


class FeedbackOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    match_id: Optional[uuid.UUID] = None
    rating: Optional[int] = None
    message: str
    created_at: Optional[datetime] = None


class CreateFeedbackRequest(BaseModel):
    message: Optional[str] = None
    match_id: Optional[str] = None
    rating: Optional[int] = None
