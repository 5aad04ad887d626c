from .match import MatchCandidate, MatchRecord, CreateMatchRequest, RejectMatchRequest
from .skill import SkillOut, UserSkillOut, AddUserSkillRequest
from .feedback import FeedbackOut, CreateFeedbackRequest
