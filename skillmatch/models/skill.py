import enum
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, func, UniqueConstraint, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from skillmatch.db.base import Base


class SkillType(str, enum.Enum):
    WANT = "want"
    GIVE = "give"


class Skill(Base):
    """Reference catalog; rows are managed outside this service."""
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)


class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Supabase auth user id, kept as text so ordering is lexicographic
    user_id = Column(UUID(as_uuid=False), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False)
    type = Column(String(10), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    skill = relationship("Skill")

    __table_args__ = (
        UniqueConstraint('user_id', 'skill_id', 'type', name='uq_user_skill_type'),
        Index('ix_user_skills_skill_type', 'skill_id', 'type'),
        CheckConstraint("type IN ('want', 'give')", name='ck_user_skills_type'),
    )
