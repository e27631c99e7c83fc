"""Scorer and narrative outputs, and the combined match result."""

from pydantic import BaseModel, ConfigDict, Field


class MatchScore(BaseModel):
    """Numeric score plus the skill diff between resume and job."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(0, ge=0, le=100)
    common_skills: tuple[str, ...] = ()  # resume ∩ job
    missing_skills: tuple[str, ...] = ()  # job only
    extra_skills: tuple[str, ...] = ()  # resume only


class Narrative(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str = ""
    recommendations: tuple[str, ...] = Field((), max_length=3)


class MatchResult(BaseModel):
    """Full outcome of matching one resume against one job posting."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(0, ge=0, le=100)
    common_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    extra_skills: tuple[str, ...] = ()
    summary: str = ""
    recommendations: tuple[str, ...] = ()
    job_keywords: tuple[str, ...] = ()
