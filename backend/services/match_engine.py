"""Match engine: resume text + job text -> MatchResult.

Pipeline:
1. Skill extraction on each side (dictionary lookup + keyword ranking)
2. Skill diff and weighted score
3. Rule-based narrative from the score and diff

Pure and synchronous; one engine instance can serve concurrent requests.
"""

import logging

from models.schemas.match_result import MatchResult
from models.schemas.skill_profile import SkillProfile
from services import narrative, scorer
from services.skill_extractor import DEFAULT_DICTIONARY, SkillDictionary, SkillExtractor

logger = logging.getLogger(__name__)


class MatchEngine:
    def __init__(self, dictionary: SkillDictionary = DEFAULT_DICTIONARY) -> None:
        self.extractor = SkillExtractor(dictionary)

    def extract(self, text: str) -> SkillProfile:
        return self.extractor.extract(text)

    def compare(self, resume: SkillProfile, job: SkillProfile) -> MatchResult:
        match = scorer.score(resume, job)
        story = narrative.generate(match, job.keywords)
        logger.debug(
            "Match score %d (common=%d missing=%d extra=%d)",
            match.score,
            len(match.common_skills),
            len(match.missing_skills),
            len(match.extra_skills),
        )
        return MatchResult(
            score=match.score,
            common_skills=match.common_skills,
            missing_skills=match.missing_skills,
            extra_skills=match.extra_skills,
            summary=story.summary,
            recommendations=story.recommendations,
            job_keywords=job.keywords,
        )

    def match(self, resume_text: str, job_text: str) -> MatchResult:
        return self.compare(self.extract(resume_text), self.extract(job_text))


_engine: MatchEngine | None = None


def get_engine() -> MatchEngine:
    global _engine
    if _engine is None:
        _engine = MatchEngine()
    return _engine
