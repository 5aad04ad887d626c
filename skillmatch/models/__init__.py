from .skill import Skill, UserSkill, SkillType
from .profile import Profile
from .match import Match, MatchStatus
from .feedback import Feedback
