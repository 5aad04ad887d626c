from datetime import datetime
from typing import List, Optional
import uuid
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class MatchCandidate(BaseModel):
    """A user who gives at least one skill the requesting user wants. Never persisted."""
    user_id: str
    full_name: Optional[str] = None
    contact_link: Optional[str] = None
    avatar_url: Optional[str] = None
    matched_skills: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def match_count(self) -> int:
        return len(self.matched_skills)


class MatchRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_a: str
    user_b: str
    matched_skills: List[str] = Field(default_factory=list)
    status: str
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None

    @field_validator("matched_skills", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return v or []


# Request bodies keep every field optional so that a missing id is reported
# as {"error": "..."} by the service rather than as a schema error.

class CreateMatchRequest(BaseModel):
    user_a: Optional[str] = None
    user_b: Optional[str] = None
    matched_skills: Optional[List[str]] = None


class RejectMatchRequest(BaseModel):
    reason: Optional[str] = None
