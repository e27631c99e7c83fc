"""Resume vs. job skill comparison and match scoring."""

import math

from models.schemas.match_result import MatchScore
from models.schemas.skill_profile import SkillProfile

# Overlap is rewarded more than gaps are penalised
W_COMMON = 0.75
W_COVERAGE = 0.25


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def skill_diff(
    resume_skills: tuple[str, ...] | list[str], job_skills: tuple[str, ...] | list[str]
) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
    """Split skills into (common, missing, extra), comparing case-insensitively.

    common and extra keep resume order, missing keeps job order.
    """
    resume_set = {s.lower() for s in resume_skills}
    job_set = {s.lower() for s in job_skills}
    common = tuple(s for s in resume_skills if s.lower() in job_set)
    missing = tuple(s for s in job_skills if s.lower() not in resume_set)
    extra = tuple(s for s in resume_skills if s.lower() not in job_set)
    return common, missing, extra


def compute_score(common_count: int, missing_count: int, job_skill_count: int) -> int:
    """Weighted match percentage, 0-100.

    A job with no recognised skills is counted as one skill, so it scores
    25 regardless of the resume.
    """
    denominator = max(1, job_skill_count)
    common_ratio = common_count / denominator
    missing_ratio = missing_count / denominator
    raw = (common_ratio * W_COMMON + (1 - missing_ratio) * W_COVERAGE) * 100
    return min(100, max(0, _round_half_up(raw)))


def score(resume: SkillProfile, job: SkillProfile) -> MatchScore:
    common, missing, extra = skill_diff(resume.skills, job.skills)
    return MatchScore(
        score=compute_score(len(common), len(missing), len(job.skills)),
        common_skills=common,
        missing_skills=missing,
        extra_skills=extra,
    )
