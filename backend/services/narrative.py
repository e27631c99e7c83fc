"""Rule-based summary and recommendations for a match score."""

from models.schemas.match_result import MatchScore, Narrative

STRONG_MATCH_THRESHOLD = 80
DECENT_MATCH_THRESHOLD = 60

MAX_MISSING_LISTED = 12
MAX_EXTRA_LISTED = 10
MAX_KEYWORDS_LISTED = 10

STRONG_SUMMARY = (
    "This looks like a strong match. Your resume already mentions many key "
    "skills required for this job."
)
DECENT_SUMMARY = (
    "This looks like a decent match. You match several important skills, but "
    "there are some gaps you may want to close before applying."
)
WEAK_SUMMARY = (
    "This seems like a weak match right now. You might still apply if you "
    "really like the role, but you should expect competition and consider "
    "upskilling first."
)


def summarize(score: int) -> str:
    if score >= STRONG_MATCH_THRESHOLD:
        return STRONG_SUMMARY
    if score >= DECENT_MATCH_THRESHOLD:
        return DECENT_SUMMARY
    return WEAK_SUMMARY


def recommend(match: MatchScore, job_keywords: tuple[str, ...] | list[str]) -> list[str]:
    """Build up to three tips: missing skills, extra skills, keywords to mirror."""
    tips = []
    if match.missing_skills:
        tips.append(
            "Consider adding or emphasizing these skills if you actually have them: "
            + ", ".join(match.missing_skills[:MAX_MISSING_LISTED])
            + "."
        )
    if match.extra_skills:
        tips.append(
            "Your resume highlights these skills that are not mentioned strongly in "
            "the job description: "
            + ", ".join(match.extra_skills[:MAX_EXTRA_LISTED])
            + ". If space is tight, you might reduce focus on them for this "
            "particular application."
        )
    if job_keywords:
        tips.append(
            "Try to mirror some of the important keywords from the job description "
            "(ATS friendly), for example: "
            + ", ".join(job_keywords[:MAX_KEYWORDS_LISTED])
            + "."
        )
    return tips


def generate(match: MatchScore, job_keywords: tuple[str, ...] | list[str]) -> Narrative:
    return Narrative(
        summary=summarize(match.score),
        recommendations=tuple(recommend(match, job_keywords)),
    )
