import enum
import uuid
from sqlalchemy import Column, String, Text, TIMESTAMP, Index, func, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from skillmatch.db.base import Base


class MatchStatus(str, enum.Enum):
    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Match(Base):
    """A proposal between two users; user_a always sorts before user_b."""
    __tablename__ = "matches"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_a = Column(UUID(as_uuid=False), nullable=False, index=True)
    user_b = Column(UUID(as_uuid=False), nullable=False, index=True)

    matched_skills = Column(ARRAY(Text), default=list, server_default="{}", nullable=False)
    status = Column(String(20), default=MatchStatus.PROPOSED.value, server_default=MatchStatus.PROPOSED.value, nullable=False)
    reason = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    accepted_at = Column(TIMESTAMP(timezone=True))

    __table_args__ = (
        Index('ix_match_created', 'created_at'),
        CheckConstraint("status IN ('proposed', 'accepted', 'rejected')", name='ck_matches_status'),
    )
