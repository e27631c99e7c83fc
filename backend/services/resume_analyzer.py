"""Builds the /analyze response from resume and job texts.

Runs the match engine and wraps its result with the job title/company
parsed from the posting's page title plus text snippets for the client.
"""

import logging

from models.responses import AnalysisResponse
from services.job_fetcher import split_page_title
from services.match_engine import MatchEngine, get_engine

logger = logging.getLogger(__name__)

APP_NAME = "ApplyEasy"
SNIPPET_CHARS = 600
FULL_TEXT_CHARS = 8000


def analyze(
    resume_text: str,
    job_text: str,
    page_title: str = "",
    job_url: str = "",
    engine: MatchEngine | None = None,
) -> AnalysisResponse:
    engine = engine or get_engine()
    result = engine.match(resume_text, job_text)
    job_title, company = split_page_title(page_title)

    logger.info(
        "Analyzed resume (%d chars) vs job (%d chars): score %d",
        len(resume_text), len(job_text), result.score,
    )

    return AnalysisResponse(
        app_name=APP_NAME,
        job_title=job_title or "Job",
        company=company,
        job_url=job_url,
        match_score=result.score,
        summary=result.summary,
        recommendations=list(result.recommendations),
        common_skills=list(result.common_skills),
        missing_skills=list(result.missing_skills),
        extra_skills=list(result.extra_skills),
        job_snippet=job_text[:SNIPPET_CHARS],
        resume_snippet=resume_text[:SNIPPET_CHARS],
        full_job_text=job_text[:FULL_TEXT_CHARS],
        full_resume_text=resume_text[:FULL_TEXT_CHARS],
    )
