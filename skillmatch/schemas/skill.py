from typing import Optional
from pydantic import BaseModel, ConfigDict


class SkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserSkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    skill_id: int
    type: str


class AddUserSkillRequest(BaseModel):
    skill_id: Optional[int] = None
    type: Optional[str] = None
