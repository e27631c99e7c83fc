from typing import Literal

from pydantic import BaseModel, Field

TrackerStatus = Literal["saved", "applied", "interview", "offer", "rejected"]


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=50000, description="Job description text")


class ResumeGuideRequest(BaseModel):
    resume_text: str = ""
    job_text: str = ""


class InterviewQuestionsRequest(BaseModel):
    job_text: str = ""
    resume_text: str = ""


class InterviewFeedbackRequest(BaseModel):
    question: str = ""
    answer: str = ""
    job_text: str = ""
    resume_text: str = ""


class CoverLetterRequest(BaseModel):
    resume_text: str = ""
    job_text: str = ""
    job_title: str = ""
    company_name: str = ""
    applicant_name: str = ""


class MentorChatRequest(BaseModel):
    message: str = ""
    resume_text: str = ""
    job_text: str = ""


class LinkedInProfileRequest(BaseModel):
    resume_text: str = ""
    job_text: str = ""
    target_role: str = ""
    tone: Literal["default", "student", "experienced", "casual"] = "default"


class ResumeBuilderRequest(BaseModel):
    full_name: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    level: str = ""
    skills: str = ""
    projects: str = ""
    achievements: str = ""


class TrackerJobCreate(BaseModel):
    user_id: str = ""
    job_title: str | None = None
    company: str | None = None
    job_url: str | None = None
    match_score: float | None = Field(None, ge=0, le=100)
    status: TrackerStatus | None = None
    notes: str | None = None


class TrackerJobUpdate(BaseModel):
    job_title: str | None = None
    company: str | None = None
    job_url: str | None = None
    match_score: float | None = Field(None, ge=0, le=100)
    status: TrackerStatus | None = None
    notes: str | None = None


class ResumePdfRequest(BaseModel):
    name: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""
    education: str = ""
    skills_languages: str = ""
    skills_frameworks: str = ""
    skills_databases: str = ""
    skills_tools: str = ""
    project1_title: str = ""
    project1_desc: str = ""
    project1_tech: str = ""
    project2_title: str = ""
    project2_desc: str = ""
    project2_tech: str = ""
    certs: str = ""
    extras: str = ""
