"""Value types produced by the match engine."""

from models.schemas.match_result import MatchResult, MatchScore, Narrative
from models.schemas.skill_profile import SkillProfile

__all__ = [
    "SkillProfile",
    "MatchScore",
    "Narrative",
    "MatchResult",
]
